"""
Frontmatter Validation Schema

Pydantic model that turns the loosely-shaped YAML frontmatter of an article
into fixed-shape fields. Missing or empty keys get their defaults, a scalar
category becomes a one-element list, and non-string scalars are coerced.
"""

import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.article import DATE_FORMAT, DEFAULT_ARTICLE_DATE, DEFAULT_ARTICLE_TYPE


def _is_blank(value: Any) -> bool:
    """Values an author may leave in place of a missing key."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


class FrontmatterSchema(BaseModel):
    """
    Normalized article frontmatter.

    `title` stays None when absent so the caller can fall back to the slug.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    title: Optional[str] = Field(
        default=None,
        description="Display title"
    )
    date: str = Field(
        default=DEFAULT_ARTICLE_DATE,
        description="Publication date as MM-DD-YYYY"
    )
    categories: List[str] = Field(
        default_factory=list,
        description="Ordered category names"
    )
    article_type: str = Field(
        default=DEFAULT_ARTICLE_TYPE,
        description="Section discriminator used for grouping"
    )

    @model_validator(mode='before')
    @classmethod
    def merge_category_keys(cls, data: Any) -> Any:
        """Accept the singular `category` key when `categories` is missing."""
        if not isinstance(data, dict):
            raise ValueError("Frontmatter must be a key/value mapping")
        data = dict(data)
        if _is_blank(data.get('categories')):
            data['categories'] = data.get('category')
        return data

    @field_validator('title', mode='before')
    @classmethod
    def normalize_title(cls, v) -> Optional[str]:
        if _is_blank(v):
            return None
        return str(v)

    @field_validator('date', mode='before')
    @classmethod
    def normalize_date(cls, v) -> str:
        """YAML turns ISO dates into date objects; write them back as MM-DD-YYYY."""
        if _is_blank(v):
            return DEFAULT_ARTICLE_DATE
        if isinstance(v, datetime.date):
            return v.strftime(DATE_FORMAT)
        return str(v)

    @field_validator('categories', mode='before')
    @classmethod
    def normalize_categories(cls, v) -> List[str]:
        if _is_blank(v):
            return []
        if isinstance(v, (list, tuple)):
            return [str(item) for item in v if not _is_blank(item)]
        if isinstance(v, dict):
            raise ValueError("categories must be a string or a list of strings")
        return [str(v)]

    @field_validator('article_type', mode='before')
    @classmethod
    def normalize_article_type(cls, v) -> str:
        if _is_blank(v):
            return DEFAULT_ARTICLE_TYPE
        return str(v)


def validate_frontmatter(data: dict) -> FrontmatterSchema:
    """
    Validate and normalize a raw frontmatter mapping.

    Args:
        data: Metadata dictionary as loaded from the YAML header

    Returns:
        Validated FrontmatterSchema instance

    Raises:
        ValueError: If the metadata has a shape that can't be normalized
    """
    try:
        return FrontmatterSchema.model_validate(data)
    except ValueError as e:
        raise ValueError(f"Invalid frontmatter: {str(e)}")
