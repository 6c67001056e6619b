"""Record store over the catalog's XML document."""
import logging
import xml.etree.ElementTree as ET
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Protocol, Tuple, Union

from bookcatalog.document import load_document, save_document
from bookcatalog.exceptions import (
    AlreadyExistsError,
    InvalidArgumentError,
    RecordNotFoundError,
)
from bookcatalog.models import BOOK_ELEMENT, ISBN_ELEMENT, Book
from bookcatalog.parse import build_book_element, parse_book, parse_books

logger = logging.getLogger(__name__)


class BookStore(Protocol):
    """Operations every catalog backend provides."""
    
    def list_books(self) -> List[Book]: ...
    
    def get_book(self, isbn: str) -> Book: ...
    
    def create_book(self, book: Book) -> None: ...
    
    def update_book(self, patch: Book) -> Book: ...
    
    def delete_book(self, isbn: str) -> None: ...


def merge_book(baseline: Book, patch: Book) -> Book:
    """
    Combine an update request with the stored book.
    
    A patch field replaces the stored value only when it carries
    something: non-blank text, a non-empty author list, a positive
    year or price. The ISBN always comes from the patch.
    
    Args:
        baseline: Book as currently stored
        patch: Update request
    
    Returns:
        New Book with the merged values
    """
    return replace(
        baseline,
        isbn=patch.isbn,
        title=patch.title if patch.title and patch.title.strip() else baseline.title,
        price=patch.price if patch.price is not None and patch.price > 0 else baseline.price,
        category=patch.category if patch.category and patch.category.strip() else baseline.category,
        authors=list(patch.authors) if patch.authors else list(baseline.authors),
        year=patch.year if patch.year is not None and patch.year > 0 else baseline.year
    )


class XmlBookStore:
    """Book store backed by a single XML file.
    
    The file is read at the start of every call and written right after
    every change; nothing is kept in memory between calls.
    """
    
    def __init__(self, location: Union[str, Path]):
        """
        Initialize the store.
        
        Args:
            location: Path of the XML document
        """
        self.location = location
    
    def _find(self, root: ET.Element, isbn: str) -> Tuple[int, Optional[ET.Element]]:
        """Return index and element of the first book with this ISBN."""
        for index, element in enumerate(root):
            if element.tag == BOOK_ELEMENT and element.findtext(ISBN_ELEMENT) == isbn:
                return index, element
        return -1, None
    
    def list_books(self) -> List[Book]:
        """
        Get every book in document order.
        
        Returns:
            List of Book objects (empty if the document has no books)
        """
        tree = load_document(self.location)
        books = parse_books(tree.getroot())
        logger.info(f"Loaded {len(books)} books from {self.location}")
        return books
    
    def get_book(self, isbn: str) -> Book:
        """Get a book by ISBN."""
        tree = load_document(self.location)
        _, element = self._find(tree.getroot(), isbn)
        if element is None:
            raise RecordNotFoundError(isbn)
        return parse_book(element)
    
    def create_book(self, book: Book) -> None:
        """
        Append a new book to the document.
        
        Args:
            book: Book to add; validated before the document is read
        
        Raises:
            AlreadyExistsError: If the ISBN is already stored
        """
        element = build_book_element(book)
        
        tree = load_document(self.location)
        root = tree.getroot()
        _, existing = self._find(root, book.isbn)
        if existing is not None:
            raise AlreadyExistsError(book.isbn)
        
        root.append(element)
        save_document(tree, self.location)
        logger.info(f"Added book: {book.isbn}")
    
    def update_book(self, patch: Book) -> Book:
        """
        Merge an update request into the stored book.
        
        Args:
            patch: Update request; unset fields keep their stored values
        
        Returns:
            The book as stored after the update
        """
        if patch is None:
            raise InvalidArgumentError("Book cannot be null.")
        if not patch.isbn or not patch.isbn.strip():
            raise InvalidArgumentError("ISBN cannot be null or empty.")
        
        tree = load_document(self.location)
        root = tree.getroot()
        index, element = self._find(root, patch.isbn)
        if element is None:
            raise RecordNotFoundError(patch.isbn)
        
        merged = merge_book(parse_book(element), patch)
        updated_element = build_book_element(merged)
        
        # Keep the book at its original position
        root.remove(element)
        root.insert(index, updated_element)
        save_document(tree, self.location)
        
        logger.info(f"Updated book: {patch.isbn}")
        return merged
    
    def delete_book(self, isbn: str) -> None:
        """Remove a book by ISBN."""
        if not isbn or not isbn.strip():
            raise InvalidArgumentError("ISBN cannot be null or empty.")
        
        tree = load_document(self.location)
        root = tree.getroot()
        _, element = self._find(root, isbn)
        if element is None:
            raise RecordNotFoundError(isbn)
        
        root.remove(element)
        save_document(tree, self.location)
        logger.info(f"Deleted book: {isbn}")
