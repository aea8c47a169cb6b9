"""
Content item data models.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class ContentFormat(str, Enum):
    """Kind of media a discovery request is scoped to"""
    VIDEOS = 'Videos'
    PODCASTS = 'Podcasts'
    DOCUMENTARIES = 'Documentaries'
    NEWS = 'News'
    ARTICLES = 'Articles'


class CategoryID(str, Enum):
    """Topic category a discovery request is scoped to"""
    EDUCATION = 'education'
    BUSINESS = 'business'
    POLITICS = 'politics'
    CULTURE = 'culture'
    HEALTH = 'health'
    SCIENCE = 'science'


@dataclass(frozen=True)
class Category:
    """Static reference data for one topic category"""
    id: CategoryID
    label: str
    description: str
    icon: str
    color: str

    def to_dict(self) -> Dict:
        return {
            'id': self.id.value,
            'label': self.label,
            'description': self.description,
            'icon': self.icon,
            'color': self.color,
        }


@dataclass
class ContentItem:
    """A validated, ranked discovery result"""
    id: str
    title: str
    author: str
    description: str
    views: Union[int, float]
    likes: Union[int, float]
    comments: Union[int, float]
    ratio: float
    thumbnail: str
    format: ContentFormat
    category: CategoryID
    published_at: str
    verified: bool = True

    def to_dict(self) -> Dict:
        """Serialize with the camelCase keys the frontend expects"""
        return {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'description': self.description,
            'views': self.views,
            'likes': self.likes,
            'comments': self.comments,
            'ratio': self.ratio,
            'thumbnail': self.thumbnail,
            'format': self.format.value,
            'category': self.category.value,
            'verified': self.verified,
            'publishedAt': self.published_at,
        }


Count = Union[int, float]


class RawContentRecord(BaseModel):
    """Shape a single oracle record must have before it becomes a ContentItem.

    Unknown keys are ignored. Counts may arrive as numeric strings and are
    coerced; anything else that does not fit drops the record.
    """
    model_config = ConfigDict(extra='ignore')

    id: str
    title: str
    author: str
    views: Count
    likes: Count
    comments: Count
    description: str
    thumbnail: str
    publishedAt: Optional[str] = None

    @field_validator('id')
    @classmethod
    def _id_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('id must not be blank')
        return value

    @field_validator('views', 'likes', 'comments')
    @classmethod
    def _count_is_sane(cls, value: Count) -> Count:
        try:
            finite = math.isfinite(float(value))
        except OverflowError:
            finite = False
        if not finite or value < 0:
            raise ValueError('count must be a finite non-negative number')
        return value
