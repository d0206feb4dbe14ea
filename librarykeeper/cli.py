"""Demonstration: stock a library and lend one book to each user."""

from __future__ import annotations

from collections.abc import Sequence

from .book import Book
from .library import Library
from .log import log_error
from .user import User


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lending demonstration; errors are logged, never raised."""
    try:
        library = Library()
        library.add_book(Book("1984", "George Orwell", "1234-5678", False, ""))
        library.add_book(Book("To Kill a Mockingbird", "Harper Lee", "2345-6789", False, ""))
        library.add_book(Book("The Great Gatsby", "F. Scott Fitzgerald", "3456-7890", False, ""))

        for name in ("Toto", "Tata", "Titi"):
            library.add_user(User(name))

        for user_id, isbn in zip(library.user_uuids(), library.book_isbns()):
            library.borrow_book(user_id, isbn)

        library.display_users()
        library.display_books()
    except Exception as exc:
        log_error(f"An error occurred: {exc}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())