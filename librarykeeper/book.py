"""Books held by the library."""

from __future__ import annotations

from .log import log, log_warning

NO_BORROWER = "Error, no borrower specified"


class BookError(Exception):
    """Raised when a book is created in an inconsistent state."""


class Book:
    """A book with its borrowing state."""

    def __init__(
        self,
        title: str,
        author: str,
        isbn: str,
        is_borrowed: bool = False,
        borrower: str = "",
    ) -> None:
        if is_borrowed and not borrower:
            raise BookError(NO_BORROWER)
        self._title = title
        self._author = author
        self._isbn = isbn
        self._is_borrowed = is_borrowed
        self._borrower = borrower
        log(f"Book created: {title} by {author}")

    def __repr__(self) -> str:
        return f"Book(title={self._title!r}, author={self._author!r}, isbn={self._isbn!r})"

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value
        log_warning(f"Book title changed to: {value}")

    @property
    def author(self) -> str:
        return self._author

    @author.setter
    def author(self, value: str) -> None:
        self._author = value
        log_warning(f"Book author changed to: {value}")

    @property
    def isbn(self) -> str:
        return self._isbn

    @isbn.setter
    def isbn(self, value: str) -> None:
        self._isbn = value
        log_warning(f"Book ISBN changed to: {value}")

    @property
    def borrower(self) -> str:
        return self._borrower

    @borrower.setter
    def borrower(self, value: str) -> None:
        self._borrower = value
        log_warning(f"Book borrower changed to: {value}")

    @property
    def is_borrowed(self) -> bool:
        return self._is_borrowed

    def set_borrowed(self, is_borrowed: bool, borrower: str = "") -> None:
        """Change the borrow status and the borrower together."""
        self._is_borrowed = is_borrowed
        self._borrower = borrower
        state = "borrowed" if is_borrowed else "available"
        log_warning(f"Book {self._title} borrow status changed to {state}")

    def display(self) -> None:
        """Log the book's details."""
        log(f"Book title: {self._title}")
        log(f"Book author: {self._author}")
        log(f"Book ISBN: {self._isbn}")
        log(f"Book is {'borrowed' if self._is_borrowed else 'available'}")
        if self._is_borrowed:
            log_warning(f"Book borrower: {self._borrower}")
        else:
            log("Book is available for borrowing.")