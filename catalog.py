"""
Static reference data: topic categories and content formats.
"""
from typing import List, Optional

from data_models import Category, CategoryID, ContentFormat

CATEGORIES: tuple = (
    Category(
        id=CategoryID.EDUCATION,
        label='Education & Skills',
        description='Learn new disciplines and master modern skills.',
        icon='🎓',
        color='from-blue-600 to-indigo-700',
    ),
    Category(
        id=CategoryID.BUSINESS,
        label='Business & Finance',
        description='Market analysis, entrepreneurship, and wealth management.',
        icon='💼',
        color='from-emerald-600 to-teal-700',
    ),
    Category(
        id=CategoryID.POLITICS,
        label='Political Content',
        description='Geopolitics, policy analysis, and global governance.',
        icon='⚖️',
        color='from-rose-600 to-pink-700',
    ),
    Category(
        id=CategoryID.CULTURE,
        label='Cultural & Religious',
        description='Philosophical insights and deep cultural perspectives.',
        icon='🏺',
        color='from-amber-600 to-orange-700',
    ),
    Category(
        id=CategoryID.HEALTH,
        label='Health & Medical',
        description='Scientific research, bio-hacking, and mental wellness.',
        icon='🩺',
        color='from-cyan-600 to-sky-700',
    ),
    Category(
        id=CategoryID.SCIENCE,
        label='Science & Technology',
        description='Emerging tech, space exploration, and AI.',
        icon='🔬',
        color='from-purple-600 to-fuchsia-700',
    ),
)

FORMATS: tuple = tuple(fmt.value for fmt in ContentFormat)


def get_category(category_id) -> Optional[Category]:
    """Look up a category by id, returning None if it is unknown"""
    for category in CATEGORIES:
        if category.id == category_id:
            return category
    return None


def get_category_by_label(label) -> Optional[Category]:
    """Look up a category by its display label, ignoring case"""
    if not isinstance(label, str):
        return None
    wanted = label.strip().casefold()
    for category in CATEGORIES:
        if category.label.casefold() == wanted:
            return category
    return None


def list_categories() -> List[dict]:
    return [category.to_dict() for category in CATEGORIES]
