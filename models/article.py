"""
Article model.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

DATE_FORMAT = "%m-%d-%Y"
DEFAULT_ARTICLE_DATE = "01-01-2024"
DEFAULT_ARTICLE_TYPE = "misc"


def _ordinal(day: int) -> str:
    """Return day of month with its English suffix (1st, 2nd, 11th...)."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


@dataclass
class Article:
    """Represents a Markdown article on disk."""
    id: str
    title: str
    date: str  # Format: MM-DD-YYYY
    categories: List[str] = field(default_factory=list)
    article_type: str = DEFAULT_ARTICLE_TYPE

    # Only populated by the repository's single-article fetch and preview
    # enrichment; list-level records leave them empty.
    content_html: Optional[str] = None
    preview: Optional[str] = None

    @property
    def date_obj(self) -> datetime:
        """
        Return datetime object for sorting.

        Dates that don't parse as MM-DD-YYYY sort as the oldest possible date.
        """
        try:
            return datetime.strptime(self.date, DATE_FORMAT)
        except (TypeError, ValueError):
            return datetime.min

    @property
    def formatted_date(self) -> str:
        """Return long human-readable date, e.g. 'January 1st 2024'."""
        try:
            date_obj = datetime.strptime(self.date, DATE_FORMAT)
        except (TypeError, ValueError):
            return self.date
        return f"{date_obj.strftime('%B')} {_ordinal(date_obj.day)} {date_obj.year}"
