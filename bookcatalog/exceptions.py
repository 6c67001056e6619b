"""Failure kinds raised by the catalog core."""


class CatalogError(Exception):
    """Base exception for book catalog errors."""


class NotFoundError(CatalogError):
    """Something the caller asked for is absent."""


class DocumentNotFoundError(NotFoundError):
    """The backing XML document is missing or empty."""
    
    def __init__(self, location):
        self.location = location
        super().__init__(f"XML file could not be found. File path: {location}")


class RecordNotFoundError(NotFoundError):
    """No book with the requested ISBN exists in the document."""
    
    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"Book not found by ISBN: {isbn}")


class AlreadyExistsError(CatalogError):
    """Trying to add a book whose ISBN is already stored."""
    
    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"Book with same ISBN: {isbn} already exists")


class TranscodeError(CatalogError):
    """A document element could not be read as a book."""


class ValidationError(CatalogError):
    """A book violates a required-field rule and cannot be written."""


class InvalidArgumentError(CatalogError):
    """A required call parameter is missing or empty."""


class UnsupportedFormatError(CatalogError):
    """Requested report format has no renderer."""
    
    def __init__(self, report_format):
        self.report_format = report_format
        super().__init__(f"Unsupported report format: {report_format}")
