"""The library: a collection of books and users."""

from __future__ import annotations

import uuid

from .book import Book
from .log import log, log_warning
from .user import User

BOOK_ALREADY_EXISTS = "Book already exists in the library."
BOOK_NOT_FOUND = "Book not found in the library."
USER_ALREADY_EXISTS = "User already exists in the library."
USER_NOT_FOUND = "User not found in the library."
BOOK_ALREADY_BORROWED = "Book is already borrowed by another user."


class LibraryError(Exception):
    """Raised when a library operation cannot be carried out."""


def _contains(items: list, item: object) -> bool:
    return any(existing is item for existing in items)


class Library:
    """Books and users, with borrowing between them."""

    def __init__(self) -> None:
        self._users: list[User] = []
        self._books: list[Book] = []
        log("Library initialized.")

    def add_book(self, book: Book) -> None:
        if _contains(self._books, book):
            raise LibraryError(BOOK_ALREADY_EXISTS)
        self._books.append(book)
        log_warning(f"Book added: {book.title}")

    def remove_book(self, book: Book) -> None:
        if not _contains(self._books, book):
            raise LibraryError(BOOK_NOT_FOUND)
        self._books = [b for b in self._books if b is not book]
        log_warning(f"Book removed: {book.title}")

    def find_book(self, title: str) -> Book:
        """Return the first book with this title."""
        return next(
            (b for b in self._books if b.title == title),
            None,
        ) or self._missing(BOOK_NOT_FOUND)

    def find_book_by_isbn(self, isbn: str) -> Book:
        """Return the first book with this ISBN."""
        return next(
            (b for b in self._books if b.isbn == isbn),
            None,
        ) or self._missing(BOOK_NOT_FOUND)

    def add_user(self, user: User) -> None:
        if _contains(self._users, user):
            raise LibraryError(USER_ALREADY_EXISTS)
        self._users.append(user)
        log_warning(f"User added: {user.name}")

    def remove_user(self, user: User) -> None:
        if not _contains(self._users, user):
            raise LibraryError(USER_NOT_FOUND)
        self._users = [u for u in self._users if u is not user]
        log_warning(f"User removed: {user.name}")

    def find_user(self, name: str) -> User:
        """Return the first user with this name."""
        return next(
            (u for u in self._users if u.name == name),
            None,
        ) or self._missing(USER_NOT_FOUND)

    def find_user_by_id(self, user_id: uuid.UUID | bytes) -> User:
        """Return the user with this UUID, given as a UUID or 16 raw bytes."""
        if isinstance(user_id, (bytes, bytearray)):
            user_id = uuid.UUID(bytes=bytes(user_id))
        return next(
            (u for u in self._users if u.uuid == user_id),
            None,
        ) or self._missing(USER_NOT_FOUND)

    def borrow_book(self, user_id: uuid.UUID | bytes, isbn: str) -> None:
        """Lend the book with this ISBN to the user with this UUID."""
        user = self.find_user_by_id(user_id)
        book = self.find_book_by_isbn(isbn)
        if book.is_borrowed:
            raise LibraryError(BOOK_ALREADY_BORROWED)
        book.set_borrowed(True)
        book.borrower = user.name
        user.borrow_book(isbn)
        log_warning(f"Book borrowed: {book.title} by {user.name}")

    def user_uuids(self) -> list[uuid.UUID]:
        return [user.uuid for user in self._users]

    def book_isbns(self) -> list[str]:
        return [book.isbn for book in self._books]

    def display_users(self) -> None:
        for user in self._users:
            user.display()

    def display_books(self) -> None:
        for book in self._books:
            book.display()

    @staticmethod
    def _missing(message: str):
        raise LibraryError(message)