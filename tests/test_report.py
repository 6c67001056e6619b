"""Tests for report rendering."""
from decimal import Decimal

import pytest

from bookcatalog.exceptions import InvalidArgumentError, UnsupportedFormatError
from bookcatalog.models import Book, ReportFormat
from bookcatalog.report import render_report, resolve_format


BOOKS = [
    Book("1", "Zebra <Tales>", ["Ann & Bob"], "kids", 1999, Decimal("10.50")),
    Book("2", "Alpha", ["Cy", "Di"], "O'Reilly", 2010, Decimal("0")),
]


def test_render_html_report():
    """Test the full HTML table."""
    report = render_report(ReportFormat.HTML, [BOOKS[1]])
    
    assert report.content_type == "text/html"
    assert report.content == (
        "<table border='1' style='border-collapse: collapse;'>"
        "<thead><tr><th>Title</th><th>Authors</th><th>Category</th><th>Year</th><th>Price</th></tr></thead>"
        "<tbody><tr><td>Alpha</td><td>Cy, Di</td><td>O&#x27;Reilly</td><td>2010</td><td>0</td></tr></tbody>"
        "</table>"
    )


def test_render_html_escapes_values():
    """Test that markup inside values is escaped."""
    content = render_report("html", BOOKS).content
    
    assert "<td>Zebra &lt;Tales&gt;</td>" in content
    assert "<td>Ann &amp; Bob</td>" in content
    assert "<Tales>" not in content


def test_render_html_keeps_input_order():
    """Test that rows follow the order of the books given."""
    content = render_report("html", BOOKS).content
    
    assert content.index("Zebra") < content.index("Alpha")
    assert content.count("<tr>") == 3


def test_render_html_unknown_author():
    """Test the placeholder for a book without authors."""
    book = Book("3", "Anon", [], "misc", 1900, Decimal("1"))
    
    assert "<td>Unknown Author</td>" in render_report("html", [book]).content


@pytest.mark.parametrize("books", [[], None])
def test_render_report_needs_books(books):
    """Test that rendering nothing is rejected for every format."""
    for report_format in ReportFormat:
        with pytest.raises(InvalidArgumentError):
            render_report(report_format, books)


def test_render_report_unsupported_format():
    """Test that an unknown format is named in the error."""
    with pytest.raises(UnsupportedFormatError, match="pdf"):
        render_report("pdf", BOOKS)


@pytest.mark.parametrize("name", ["html", "HTML", " Html "])
def test_resolve_format_names(name):
    """Test case-insensitive format names."""
    assert resolve_format(name) is ReportFormat.HTML
