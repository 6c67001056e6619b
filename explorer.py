#!/usr/bin/env python3
"""Book Catalog CLI - XML store & reports."""
import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation

from tabulate import tabulate

from bookcatalog.catalog import Catalog
from bookcatalog.config import Config
from bookcatalog.exceptions import CatalogError
from bookcatalog.models import UNSET_PRICE, Book

logger = logging.getLogger(__name__)


def decimal_arg(value: str) -> Decimal:
    """argparse type for prices."""
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid price: '{value}'")
    if not price.is_finite():
        raise argparse.ArgumentTypeError(f"invalid price: '{value}'")
    return price


def book_to_dict(book: Book) -> dict:
    return {
        "isbn": book.isbn,
        "title": book.title,
        "authors": book.authors,
        "category": book.category,
        "year": book.year,
        "price": str(book.price)
    }


def display_books(books, format_type: str):
    """Display books in specified format."""
    if format_type == "table":
        headers = ["ISBN", "Title", "Authors", "Category", "Year", "Price"]
        rows = [
            [
                book.isbn,
                book.title[:50] + "..." if len(book.title) > 50 else book.title,
                book.authors_str[:30] + "..." if len(book.authors_str) > 30 else book.authors_str,
                book.category,
                book.year,
                book.price
            ]
            for book in books
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))
    
    elif format_type == "json":
        print(json.dumps([book_to_dict(book) for book in books], indent=2))
    
    elif format_type == "compact":
        for i, book in enumerate(books, 1):
            print(f"{i}. {book.title} - {book.authors_str} ({book.isbn})")


def list_books(args, catalog: Catalog):
    """List every book in the catalog."""
    books = catalog.list_books()
    logger.info(f"Found {len(books)} books")
    display_books(books, args.format)


def show_book(args, catalog: Catalog):
    """Show a single book."""
    display_books([catalog.get_book(args.isbn)], args.format)


def add_book(args, catalog: Catalog):
    """Add a new book."""
    book = Book(
        isbn=args.isbn,
        title=args.title,
        authors=args.authors,
        category=args.category,
        year=args.year,
        price=args.price
    )
    catalog.add_book(book)
    print(f"Added {book.isbn}")


def update_book(args, catalog: Catalog):
    """Update the given fields of a book."""
    patch = Book(
        isbn=args.isbn,
        title=args.title or "",
        authors=args.authors or [],
        category=args.category or "",
        year=args.year or 0,
        price=args.price if args.price is not None else UNSET_PRICE
    )
    updated = catalog.update_book(patch)
    display_books([updated], "json")


def delete_book(args, catalog: Catalog):
    """Delete a book."""
    catalog.delete_book(args.isbn)
    print(f"Deleted {args.isbn}")


def export_report(args, catalog: Catalog):
    """Render the catalog report."""
    report = catalog.generate_report(args.format)
    
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(report.content)
        logger.info(f"Wrote {report.content_type} report to {args.output}")
    else:
        print(report.content)


COMMANDS = {
    "list": list_books,
    "show": show_book,
    "add": add_book,
    "update": update_book,
    "delete": delete_book,
    "report": export_report,
}


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Book Catalog - XML store & report CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the catalog
  %(prog)s list

  # Add a book with two authors
  %(prog)s add --isbn 111 --title "A" --author X --author Y --category C --year 2000 --price 9.99

  # Change only the price
  %(prog)s update 111 --price 5.0

  # Write the HTML report
  %(prog)s report --output books.html
        """
    )
    parser.add_argument("--file", default=config.XML_FILE_PATH,
                        help=f"XML document (default: {config.XML_FILE_PATH})")
    
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    formats = ["table", "json", "compact"]
    
    # List command
    list_parser = subparsers.add_parser("list", help="List all books")
    list_parser.add_argument("--format", choices=formats, default="table", help="Output format")
    
    # Show command
    show_parser = subparsers.add_parser("show", help="Show a book by ISBN")
    show_parser.add_argument("isbn", help="Book ISBN")
    show_parser.add_argument("--format", choices=formats, default="table", help="Output format")
    
    # Add command
    add_parser = subparsers.add_parser("add", help="Add a new book")
    add_parser.add_argument("--isbn", required=True)
    add_parser.add_argument("--title", required=True)
    add_parser.add_argument("--author", dest="authors", action="append", required=True,
                            help="Author name (repeat for several)")
    add_parser.add_argument("--category", required=True)
    add_parser.add_argument("--year", type=int, required=True)
    add_parser.add_argument("--price", type=decimal_arg, required=True)
    
    # Update command
    update_parser = subparsers.add_parser("update", help="Update fields of a book")
    update_parser.add_argument("isbn", help="Book ISBN")
    update_parser.add_argument("--title")
    update_parser.add_argument("--author", dest="authors", action="append",
                               help="Author name (repeat for several); replaces all authors")
    update_parser.add_argument("--category")
    update_parser.add_argument("--year", type=int)
    update_parser.add_argument("--price", type=decimal_arg)
    
    # Delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a book by ISBN")
    delete_parser.add_argument("isbn", help="Book ISBN")
    
    # Report command
    report_parser = subparsers.add_parser("report", help="Generate a catalog report")
    report_parser.add_argument("--format", default=config.DEFAULT_REPORT_FORMAT,
                               help=f"Report format (default: {config.DEFAULT_REPORT_FORMAT})")
    report_parser.add_argument("--output", help="Output file (default: stdout)")
    
    return parser


def main(argv=None):
    """Main CLI entry point."""
    config = Config()
    
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    
    parser = build_parser(config)
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        sys.exit(1)
    
    config.XML_FILE_PATH = args.file
    catalog = Catalog.from_config(config)
    
    try:
        COMMANDS[args.command](args, catalog)
    
    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except CatalogError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
