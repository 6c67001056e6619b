"""Data models for books and reports."""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import List

# Element and attribute names of the persisted document
ROOT_ELEMENT = "bookstore"
BOOK_ELEMENT = "book"
ISBN_ELEMENT = "isbn"
TITLE_ELEMENT = "title"
AUTHOR_ELEMENT = "author"
CATEGORY_ATTRIBUTE = "category"
YEAR_ELEMENT = "year"
PRICE_ELEMENT = "price"

# Marks a price that was not supplied on an update request
UNSET_PRICE = Decimal(-1)


@dataclass
class Book:
    """A single catalog entry.
    
    Every field but ``isbn`` has an "unset" default so that partial
    update requests can be expressed as a ``Book`` too.
    """
    isbn: str
    title: str = ""
    authors: List[str] = field(default_factory=list)
    category: str = ""
    year: int = 0
    price: Decimal = UNSET_PRICE
    
    @property
    def authors_str(self) -> str:
        """Format authors as comma-separated string."""
        return ", ".join(self.authors) if self.authors else "Unknown Author"


class ReportFormat(Enum):
    """Report formats that have a renderer."""
    HTML = "html"


@dataclass
class BooksReport:
    """Rendered report plus the content type to serve it with."""
    content_type: str
    content: str
