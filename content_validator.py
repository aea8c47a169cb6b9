"""
Validation and ranking of raw oracle records.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from config import THUMBNAIL_URL_TEMPLATE, TOP_N
from data_models import CategoryID, ContentFormat, ContentItem, RawContentRecord
from errors import PartialRecord

logger = logging.getLogger(__name__)


def engagement_ratio(views, likes, comments) -> float:
    """(likes + comments) / views, with the denominator floored at 1.

    Computed in floating point, so a sum past the float range gives inf.
    """
    return (float(likes) + float(comments)) / max(float(views), 1.0)


def thumbnail_for(item_id: str) -> str:
    """Deterministic placeholder image URL for an item id"""
    return THUMBNAIL_URL_TEMPLATE.format(id=quote(item_id, safe=''))


def validate_record(raw: Any) -> RawContentRecord:
    """Check a raw oracle record against the item schema.

    Raises PartialRecord when the record is not an object, lacks a required
    field or carries a value of the wrong kind.
    """
    if not isinstance(raw, dict):
        raise PartialRecord(f"Record is a {type(raw).__name__}, not an object")

    record_id = raw.get('id')
    try:
        return RawContentRecord.model_validate(raw)
    except ValidationError as e:
        problems = ', '.join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise PartialRecord(f"Invalid record ({problems})", record_id=record_id) from e


def to_content_item(record: RawContentRecord, category: CategoryID, content_format: ContentFormat,
                    retrieved_at: str) -> ContentItem:
    """Build a ContentItem, stamping the request context onto a validated record.

    Raises PartialRecord when the counts are too large for a finite ratio.
    """
    ratio = engagement_ratio(record.views, record.likes, record.comments)
    if not math.isfinite(ratio):
        raise PartialRecord("Engagement ratio is not finite", record_id=record.id)

    return ContentItem(
        id=record.id,
        title=record.title,
        author=record.author,
        description=record.description,
        views=record.views,
        likes=record.likes,
        comments=record.comments,
        ratio=ratio,
        thumbnail=thumbnail_for(record.id),
        format=ContentFormat(content_format),
        category=CategoryID(category),
        published_at=record.publishedAt or retrieved_at,
        # TODO: derive from a real provenance signal once one exists
        verified=True,
    )


def rank_items(items: List[ContentItem]) -> List[ContentItem]:
    """Sort by ratio, highest first; equal ratios keep their input order"""
    return sorted(items, key=lambda item: item.ratio, reverse=True)


def normalize_records(raw_records: List[Dict], category: CategoryID, content_format: ContentFormat,
                      retrieved_at: Optional[str] = None, limit: int = TOP_N) -> List[ContentItem]:
    """Turn raw oracle records into a ranked list of at most ``limit`` items.

    Invalid records and repeated ids are dropped one by one; this never raises.
    """
    if retrieved_at is None:
        retrieved_at = datetime.now(timezone.utc).isoformat()

    items = []
    seen_ids = set()
    for position, raw in enumerate(raw_records):
        try:
            record = validate_record(raw)
            if record.id in seen_ids:
                raise PartialRecord(f"Duplicate id {record.id}", record_id=record.id)
            item = to_content_item(record, category, content_format, retrieved_at)
        except PartialRecord as e:
            logger.warning("Dropping record %d (id=%s): %s", position, e.record_id, e)
            continue

        seen_ids.add(record.id)
        items.append(item)

    logger.info("Content validation: %d/%d records passed validation", len(items), len(raw_records))
    return rank_items(items)[:limit]
