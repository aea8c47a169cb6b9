"""
Prompt construction for the discovery and brief oracle calls.
"""
from typing import Optional

from google.genai import types

from catalog import get_category
from config import BRIEF_MAX_WORDS, CONTENT_POLICY, DEFAULT_BRIEF_CONTEXT, TOP_N
from data_models import CategoryID, ContentFormat

REQUIRED_FIELDS = (
    'id', 'title', 'author', 'views', 'likes', 'comments', 'description', 'thumbnail',
)
OPTIONAL_FIELDS = ('publishedAt',)

_NUMBER_FIELDS = {'views', 'likes', 'comments'}


def build_discovery_schema() -> types.Schema:
    """Structured-output schema: an array of content item objects"""
    properties = {}
    for name in REQUIRED_FIELDS + OPTIONAL_FIELDS:
        field_type = types.Type.NUMBER if name in _NUMBER_FIELDS else types.Type.STRING
        properties[name] = types.Schema(type=field_type)

    return types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(
            type=types.Type.OBJECT,
            properties=properties,
            required=list(REQUIRED_FIELDS),
        ),
    )


def build_discovery_prompt(category: CategoryID, query: str, content_format: ContentFormat) -> str:
    """Build the discovery instruction for a (category, query, format) request.

    The query is expected to be non-blank already; see errors.require_query.
    """
    category = CategoryID(category)
    content_format = ContentFormat(content_format)
    label = get_category(category).label

    return f"""
    Act as a high-authority content filter.
    The user is searching for "{query.strip()}" in the category "{category.value}" ({label})
    focusing on "{content_format.value}".

    Provide exactly the TOP {TOP_N} resources.
    {CONTENT_POLICY}
    For each item, generate realistic engagement metrics: views, likes and comments.
    Generate valid mock IDs that are unique within this list, and relevant descriptions.
    Provide a placeholder image URL for the thumbnail.
    Include the publication date as an ISO-8601 timestamp in publishedAt when known.

    Return ONLY one JSON array of {TOP_N} objects with the fields:
    {", ".join(REQUIRED_FIELDS + OPTIONAL_FIELDS)}.
    """


def build_brief_prompt(topic: str, context: Optional[str] = None) -> str:
    """Build the summarization instruction for a brief"""
    return f"""
    Provide a concise, factual, and high-level summary of the following: "{topic}".
    Context: {context or DEFAULT_BRIEF_CONTEXT}.
    Format: Use bullet points for key facts. Stay neutral and academic. Max {BRIEF_MAX_WORDS} words.
    """
