"""Translate between <book> elements and Book records."""
import re
import xml.etree.ElementTree as ET
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from bookcatalog.exceptions import TranscodeError, ValidationError
from bookcatalog.models import (
    AUTHOR_ELEMENT,
    BOOK_ELEMENT,
    CATEGORY_ATTRIBUTE,
    ISBN_ELEMENT,
    PRICE_ELEMENT,
    TITLE_ELEMENT,
    YEAR_ELEMENT,
    Book,
)

# Plain ASCII numbers only, no exponents or digit separators
YEAR_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
PRICE_PATTERN = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _is_finite_number(value) -> bool:
    try:
        return Decimal(value).is_finite()
    except (InvalidOperation, TypeError, ValueError):
        return False


def _required_text(element: ET.Element, name: str) -> str:
    child = element.find(name)
    if child is None:
        raise TranscodeError(f"Missing required {name} element.")
    return child.text or ""


def parse_book(element: Optional[ET.Element]) -> Book:
    """
    Decode a single <book> element.
    
    Fields are read in the order isbn, title, authors, category, year,
    price and the first missing or malformed one fails the whole element.
    
    Args:
        element: A <book> element from the catalog document
        
    Returns:
        Book object
        
    Raises:
        TranscodeError: If a required field is missing or malformed
    """
    if element is None:
        raise TranscodeError("Book element is null.")
    
    isbn = _required_text(element, ISBN_ELEMENT)
    title = _required_text(element, TITLE_ELEMENT)
    
    author_elements = element.findall(AUTHOR_ELEMENT)
    if not author_elements:
        raise TranscodeError(f"Missing required {AUTHOR_ELEMENT} elements.")
    authors = [a.text or "" for a in author_elements]
    
    category = element.get(CATEGORY_ATTRIBUTE)
    if category is None:
        raise TranscodeError(f"Missing required {CATEGORY_ATTRIBUTE} attribute.")
    
    year_str = _required_text(element, YEAR_ELEMENT)
    if not YEAR_PATTERN.fullmatch(year_str):
        raise TranscodeError(f"Invalid {YEAR_ELEMENT} value: '{year_str}'")
    year = int(year_str)
    
    price_str = _required_text(element, PRICE_ELEMENT)
    if not PRICE_PATTERN.fullmatch(price_str):
        raise TranscodeError(f"Invalid {PRICE_ELEMENT} value: '{price_str}'")
    price = Decimal(price_str.strip())
    
    return Book(
        isbn=isbn,
        title=title,
        authors=authors,
        category=category,
        year=year,
        price=price
    )


def parse_books(root: ET.Element) -> List[Book]:
    """
    Decode every <book> child of the document root, in document order.
    
    Args:
        root: Document root element
        
    Returns:
        List of Book objects (empty if the document has no books)
    """
    return [parse_book(element) for element in root.findall(BOOK_ELEMENT)]


def validate_book(book: Optional[Book]) -> None:
    """
    Check the rules every stored book must satisfy.
    
    Raises:
        ValidationError: Naming the first rule the book breaks
    """
    if book is None:
        raise ValidationError("Book cannot be null.")
    
    if _is_blank(book.isbn):
        raise ValidationError("ISBN cannot be null or empty.")
    
    if _is_blank(book.title):
        raise ValidationError("Title cannot be null or empty.")
    
    if _is_blank(book.category):
        raise ValidationError("Category cannot be null or empty.")
    
    if not book.authors or any(_is_blank(a) for a in book.authors):
        raise ValidationError("Authors cannot be null, empty, or contain null/empty values.")
    
    if book.year is None or book.year <= 0:
        raise ValidationError("Year must be a positive number.")
    
    if book.price is None or not _is_finite_number(book.price):
        raise ValidationError("Price must be a finite number.")
    
    if book.price < 0:
        raise ValidationError("Price cannot be negative.")


def build_book_element(book: Book) -> ET.Element:
    """
    Encode a book as a <book> element.
    
    The category goes on an attribute; everything else becomes a child
    element in the order isbn, title, author..., year, price.
    
    Args:
        book: Book to encode
        
    Returns:
        New, detached <book> element
        
    Raises:
        ValidationError: If the book fails ``validate_book``
    """
    validate_book(book)
    
    element = ET.Element(BOOK_ELEMENT, {CATEGORY_ATTRIBUTE: book.category})
    ET.SubElement(element, ISBN_ELEMENT).text = book.isbn
    ET.SubElement(element, TITLE_ELEMENT).text = book.title
    for author in book.authors:
        ET.SubElement(element, AUTHOR_ELEMENT).text = author
    ET.SubElement(element, YEAR_ELEMENT).text = str(book.year)
    ET.SubElement(element, PRICE_ELEMENT).text = str(book.price)
    
    return element
