"""Catalog facade used by request layers and the CLI."""
import logging
from typing import List, Union

from bookcatalog.config import Config
from bookcatalog.exceptions import CatalogError
from bookcatalog.models import Book, BooksReport, ReportFormat
from bookcatalog.report import render_report
from bookcatalog.store import BookStore, XmlBookStore

logger = logging.getLogger(__name__)


class Catalog:
    """Single entry point over a book store and the report renderer."""
    
    def __init__(self, store: BookStore):
        self.store = store
    
    @classmethod
    def from_config(cls, config: Config) -> "Catalog":
        """Build a catalog over the configured XML document."""
        return cls(XmlBookStore(config.XML_FILE_PATH))
    
    def list_books(self) -> List[Book]:
        """Get all available books."""
        logger.info("Getting all available books")
        try:
            return self.store.list_books()
        except CatalogError as e:
            logger.error(f"Failed to get all books: {e}")
            raise
    
    def get_book(self, isbn: str) -> Book:
        """Get a book by ISBN."""
        logger.info(f"Getting book by isbn: {isbn}")
        try:
            return self.store.get_book(isbn)
        except CatalogError as e:
            logger.error(f"Failed to get book by isbn {isbn}: {e}")
            raise
    
    def add_book(self, book: Book) -> Book:
        """Add a new book and return it."""
        logger.info(f"Adding new book: {book.isbn if book else None}")
        try:
            self.store.create_book(book)
        except CatalogError as e:
            logger.error(f"Failed to add new book: {e}")
            raise
        return book
    
    def update_book(self, patch: Book) -> Book:
        """Update an existing book and return the stored result."""
        logger.info(f"Updating book: {patch.isbn if patch else None}")
        try:
            return self.store.update_book(patch)
        except CatalogError as e:
            logger.error(f"Failed to update book: {e}")
            raise
    
    def delete_book(self, isbn: str) -> None:
        """Delete a book by ISBN."""
        logger.info(f"Deleting book: {isbn}")
        try:
            self.store.delete_book(isbn)
        except CatalogError as e:
            logger.error(f"Failed to delete book {isbn}: {e}")
            raise
    
    def generate_report(self, report_format: Union[ReportFormat, str]) -> BooksReport:
        """
        Render every book in the catalog.
        
        Args:
            report_format: Output format (e.g. "html")
            
        Returns:
            BooksReport with content and content type
        """
        logger.info(f"Generating report type {report_format}")
        try:
            return render_report(report_format, self.store.list_books())
        except CatalogError as e:
            logger.error(f"Failed to generate report {report_format}: {e}")
            raise
