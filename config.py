"""
Config settings for the content discovery app.
"""
import os

# Flask Configuration
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')
DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'
PORT = int(os.environ.get('PORT', 8001))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# API Configuration
GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY') or os.environ.get('API_KEY', '')
GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-3-flash-preview')

# Discovery Configuration
TOP_N = 10
HISTORY_LIMIT = 50
DEFAULT_FORMAT = 'Videos'
THUMBNAIL_URL_TEMPLATE = "https://picsum.photos/seed/{id}/400/225"

# Brief Configuration
NO_BRIEF_MESSAGE = "No brief available."
BRIEF_MAX_WORDS = 200
DEFAULT_BRIEF_CONTEXT = "General search"

# Content Policy
CONTENT_POLICY = """
Strictly provide only high-value, non-distractive resources.
Avoid clickbait, comedy, or low-quality entertainment.
Focus on academic, professional, and verified sources.
"""
