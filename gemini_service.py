"""
Gemini API gateway for content discovery and briefs.
"""
import json
import logging
from typing import Dict, List, Optional

import google.genai as genai
from google.genai import types

from config import GEMINI_MODEL, NO_BRIEF_MESSAGE
from errors import MalformedResponse, OracleUnavailable

logger = logging.getLogger(__name__)


class GeminiGateway:
    """Gateway to the Gemini API, the only component that performs I/O.

    Each public call makes exactly one request, with no retries. Failures never
    escape: discovery falls back to an empty list, briefs to NO_BRIEF_MESSAGE.
    Pass ``client`` to substitute a test double for ``genai.Client``.
    """

    def __init__(self, api_key: Optional[str] = None, model: str = GEMINI_MODEL, client=None):
        self.api_key = api_key
        self.model = model
        self._client = client

    def _get_client(self):
        """Create the SDK client on first use"""
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key or None)
        return self._client

    async def _generate(self, prompt: str, config: Optional[types.GenerateContentConfig] = None) -> Optional[str]:
        """Make one generate_content call and return the response text"""
        try:
            client = self._get_client()
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
            return response.text
        except Exception as e:
            raise OracleUnavailable(f"Gemini call failed: {e}") from e

    @staticmethod
    def parse_records(response_text: Optional[str]) -> List[Dict]:
        """Parse the oracle text as a JSON array of raw records.

        Anything around the outermost brackets is discarded. No text at all is
        an empty result set.
        """
        if not response_text or not response_text.strip():
            return []

        # Strip off everything besides the list of dictionaries
        opening_list_index = response_text.find('[')
        closing_list_index = response_text.rfind(']')
        if opening_list_index != -1 and closing_list_index > opening_list_index:
            stripped_response_text = response_text[opening_list_index:closing_list_index + 1]
        else:
            stripped_response_text = response_text

        try:
            records = json.loads(stripped_response_text)
        except (ValueError, RecursionError) as e:
            # also covers oversized integer literals and deep nesting
            raise MalformedResponse(f"Error decoding JSON: {e}") from e

        if not isinstance(records, list):
            raise MalformedResponse(
                f"Expected a JSON array, got {type(records).__name__}"
            )
        return records

    async def fetch_records(self, prompt: str, schema: types.Schema) -> List[Dict]:
        """Fetch raw discovery records; an empty list on any failure"""
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
        )
        try:
            response_text = await self._generate(prompt, config)
            records = self.parse_records(response_text)
        except OracleUnavailable:
            logger.exception("Error fetching discovery content from %s", self.model)
            return []
        except MalformedResponse as e:
            logger.warning("Discarding malformed discovery response: %s", e)
            return []

        logger.info("Oracle returned %d raw records", len(records))
        return records

    async def fetch_brief(self, prompt: str) -> str:
        """Fetch a free-text brief; NO_BRIEF_MESSAGE on failure or empty text"""
        try:
            response_text = await self._generate(prompt)
        except OracleUnavailable:
            logger.exception("Error getting brief from %s", self.model)
            return NO_BRIEF_MESSAGE

        if not response_text or not response_text.strip():
            logger.warning("Oracle returned no text for brief")
            return NO_BRIEF_MESSAGE
        return response_text
