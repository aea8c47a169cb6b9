"""
Discovery service: the boundary the UI shell talks to.
"""
import logging
from typing import List, Optional

from config import GEMINI_API_KEY, GEMINI_MODEL
from content_validator import normalize_records
from data_models import CategoryID, ContentFormat, ContentItem
from gemini_service import GeminiGateway
from prompt_builder import build_brief_prompt, build_discovery_prompt, build_discovery_schema

logger = logging.getLogger(__name__)


class DiscoveryService:
    """Runs prompt -> gateway -> normalizer for searches, prompt -> gateway for briefs.

    Neither operation raises on oracle trouble. Callers must reject blank
    queries before calling search_discovery (see errors.require_query).
    """

    def __init__(self, gateway: GeminiGateway):
        self.gateway = gateway
        self.schema = build_discovery_schema()

    @classmethod
    def from_config(cls, api_key: Optional[str] = None, model: Optional[str] = None) -> 'DiscoveryService':
        """Build a service with a gateway configured from config.py"""
        gateway = GeminiGateway(api_key=api_key or GEMINI_API_KEY, model=model or GEMINI_MODEL)
        return cls(gateway)

    async def search_discovery(self, category: CategoryID, query: str,
                               content_format: ContentFormat) -> List[ContentItem]:
        category = CategoryID(category)
        content_format = ContentFormat(content_format)
        logger.info("Discovery search: category=%s format=%s query=%r",
                    category.value, content_format.value, query)

        prompt = build_discovery_prompt(category, query, content_format)
        raw_records = await self.gateway.fetch_records(prompt, self.schema)
        return normalize_records(raw_records, category, content_format)

    async def request_brief(self, topic: str, context: Optional[str] = None) -> str:
        logger.info("Brief requested for %r", topic)
        return await self.gateway.fetch_brief(build_brief_prompt(topic, context))
