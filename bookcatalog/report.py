"""Render the catalog as a report."""
import html
import logging
from typing import Callable, Dict, Optional, Sequence, Union

from bookcatalog.exceptions import InvalidArgumentError, UnsupportedFormatError
from bookcatalog.models import Book, BooksReport, ReportFormat

logger = logging.getLogger(__name__)

REPORT_HEADERS = ["Title", "Authors", "Category", "Year", "Price"]


def _html_table(books: Sequence[Book]) -> str:
    header = "".join(f"<th>{h}</th>" for h in REPORT_HEADERS)
    rows = []
    for book in books:
        cells = [book.title, book.authors_str, book.category, str(book.year), str(book.price)]
        rows.append("<tr>" + "".join(f"<td>{html.escape(c)}</td>" for c in cells) + "</tr>")
    
    return (
        "<table border='1' style='border-collapse: collapse;'>"
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{''.join(rows)}</tbody></table>"
    )


# Renderer and content type per format
RENDERERS: Dict[ReportFormat, Callable[[Sequence[Book]], str]] = {
    ReportFormat.HTML: _html_table,
}

CONTENT_TYPES: Dict[ReportFormat, str] = {
    ReportFormat.HTML: "text/html",
}


def resolve_format(report_format: Union[ReportFormat, str]) -> ReportFormat:
    """
    Turn a format name into a ReportFormat.
    
    Args:
        report_format: Enum member or case-insensitive name (e.g. "html")
        
    Raises:
        UnsupportedFormatError: If no renderer exists for the format
    """
    if isinstance(report_format, ReportFormat):
        return report_format
    try:
        return ReportFormat(str(report_format).strip().lower())
    except ValueError:
        raise UnsupportedFormatError(report_format)


def render_report(
    report_format: Union[ReportFormat, str],
    books: Optional[Sequence[Book]]
) -> BooksReport:
    """
    Render books in the requested format.
    
    Rows follow the order of ``books``; every value is escaped before
    it is placed in the output.
    
    Args:
        report_format: Output format
        books: Books to include, at least one
        
    Returns:
        BooksReport with content and content type
        
    Raises:
        UnsupportedFormatError: If the format has no renderer
        InvalidArgumentError: If there are no books to report on
    """
    fmt = resolve_format(report_format)
    if fmt not in RENDERERS:
        raise UnsupportedFormatError(report_format)
    
    if not books:
        raise InvalidArgumentError("No books available to generate the report.")
    
    logger.info(f"Rendering {fmt.value} report for {len(books)} books")
    return BooksReport(content_type=CONTENT_TYPES[fmt], content=RENDERERS[fmt](books))
