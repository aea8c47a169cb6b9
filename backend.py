#!/usr/bin/env python3
"""
Content Discovery Backend
Flask API server exposing discovery search and AI briefs over JSON
"""

import logging
from datetime import datetime

from flask import Flask, jsonify, request
from flask_cors import CORS

from catalog import FORMATS, get_category, get_category_by_label, list_categories
from config import DEBUG, DEFAULT_FORMAT, LOG_LEVEL, PORT, SECRET_KEY
from data_models import ContentFormat
from discovery import DiscoveryService
from errors import EmptyQuery, require_query

logger = logging.getLogger(__name__)


def create_app(service: DiscoveryService = None) -> Flask:
    """Build the Flask app around a discovery service"""
    app = Flask(__name__)
    app.config['SECRET_KEY'] = SECRET_KEY
    CORS(app)

    if service is None:
        service = DiscoveryService.from_config()

    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "model": service.gateway.model,
        })

    @app.route('/api/categories', methods=['GET'])
    def get_categories():
        return jsonify(list_categories())

    @app.route('/api/formats', methods=['GET'])
    def get_formats():
        return jsonify(list(FORMATS))

    @app.route('/api/discover', methods=['POST'])
    async def discover():
        """Search for ranked content in a category and format"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        category = get_category(data.get('category')) or get_category_by_label(data.get('category'))
        if category is None:
            return jsonify({"error": f"Unknown category: {data.get('category')}"}), 400

        try:
            content_format = ContentFormat(data.get('format') or DEFAULT_FORMAT)
        except ValueError:
            return jsonify({"error": f"Unknown format: {data.get('format')}"}), 400

        try:
            query = require_query(data.get('query'))
        except EmptyQuery as e:
            return jsonify({"error": str(e)}), 400

        results = await service.search_discovery(category.id, query, content_format)
        return jsonify({
            "results": [item.to_dict() for item in results],
            "count": len(results),
        })

    @app.route('/api/brief', methods=['POST'])
    async def brief():
        """Generate a short AI summary of a topic"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        topic = data.get('topic')
        topic = topic.strip() if isinstance(topic, str) else ''
        if not topic:
            return jsonify({"error": "Topic is required"}), 400

        context = data.get('context')
        if context is not None and not isinstance(context, str):
            return jsonify({"error": "Context must be a string"}), 400

        text = await service.request_brief(topic, context)
        return jsonify({"brief": text})

    return app


if __name__ == '__main__':
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app = create_app()
    logger.info("Starting Content Discovery Backend on port %s (debug=%s)", PORT, DEBUG)
    app.run(host='0.0.0.0', port=PORT, debug=DEBUG)
