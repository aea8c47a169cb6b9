"""
Client-side session bookkeeping: viewing history, saved items and the
current discovery result slot.

Everything here lives for one session only and is never persisted.
"""
import logging
from typing import List, Optional, Tuple

from config import DEFAULT_FORMAT, HISTORY_LIMIT
from data_models import CategoryID, ContentFormat, ContentItem
from errors import require_query

logger = logging.getLogger(__name__)


class SessionLists:
    """Recently viewed and saved items, newest first"""

    def __init__(self, history_limit: int = HISTORY_LIMIT):
        self.history_limit = history_limit
        self._history: List[ContentItem] = []
        self._saved: List[ContentItem] = []

    @property
    def history(self) -> List[ContentItem]:
        return list(self._history)

    @property
    def saved(self) -> List[ContentItem]:
        return list(self._saved)

    def record_view(self, item: ContentItem):
        """Move the item to the front of history, dropping the oldest past the cap"""
        remaining = [viewed for viewed in self._history if viewed.id != item.id]
        self._history = [item] + remaining[:self.history_limit - 1]

    def is_saved(self, item_id: str) -> bool:
        return any(saved.id == item_id for saved in self._saved)

    def toggle_saved(self, item: ContentItem) -> bool:
        """Save or unsave an item; returns True if it is saved afterwards"""
        if self.is_saved(item.id):
            self._saved = [saved for saved in self._saved if saved.id != item.id]
            return False
        self._saved.insert(0, item)
        return True


class DiscoveryState:
    """Search context, result slot and loading flag for one session.

    Every search or format change gets a sequence number. Only the newest
    request may overwrite ``results`` or clear ``loading``, so a slow earlier
    call that settles late is discarded instead of replacing fresher results.
    """

    def __init__(self, service, lists: Optional[SessionLists] = None):
        self.service = service
        self.lists = lists if lists is not None else SessionLists()
        self.category: Optional[CategoryID] = None
        self.query = ''
        self.content_format = ContentFormat(DEFAULT_FORMAT)
        self.selected_item: Optional[ContentItem] = None
        self.results: List[ContentItem] = []
        self.loading = False
        self._latest_request = 0

    def select_category(self, category: CategoryID):
        self.category = CategoryID(category)

    async def search(self, query: str) -> bool:
        """Run a discovery for the current category; raises EmptyQuery on a blank query.

        Returns False if a newer request superseded this one.
        """
        query = require_query(query)
        if self.category is None:
            raise ValueError("Select a category before searching")
        self.query = query
        return await self._run(self.category, query, self.content_format)

    async def change_format(self, content_format: ContentFormat) -> bool:
        """Switch format and re-run the current search, if there is one"""
        self.content_format = ContentFormat(content_format)
        if not self.query or self.category is None:
            return False
        return await self._run(self.category, self.query, self.content_format)

    async def _run(self, category: CategoryID, query: str, content_format: ContentFormat) -> bool:
        self._latest_request += 1
        request_id = self._latest_request
        self.loading = True

        try:
            items = await self.service.search_discovery(category, query, content_format)
        finally:
            if request_id == self._latest_request:
                self.loading = False

        if request_id != self._latest_request:
            logger.info("Discarding stale results for request %d (latest is %d)",
                        request_id, self._latest_request)
            return False
        self.results = items
        return True

    def open_item(self, item: ContentItem):
        self.selected_item = item
        self.lists.record_view(item)

    def close_item(self):
        self.selected_item = None

    def toggle_saved(self, item: Optional[ContentItem] = None) -> bool:
        item = item or self.selected_item
        if item is None:
            raise ValueError("No item to save")
        return self.lists.toggle_saved(item)

    def brief_subject(self) -> Optional[Tuple[str, str]]:
        """(topic, context) for a brief: the open item, else the current search"""
        if self.selected_item is not None:
            return self.selected_item.title, self.selected_item.description
        if self.query and self.category is not None:
            return self.query, f"Category: {self.category.value}"
        return None

    async def fetch_brief(self) -> Optional[str]:
        """Request a brief for the current subject; None when there is nothing to summarize"""
        subject = self.brief_subject()
        if subject is None:
            return None
        topic, context = subject
        return await self.service.request_brief(topic, context)
