"""Library users."""

from __future__ import annotations

import uuid

from .log import log


class UserError(Exception):
    """Raised for invalid user operations."""


class User:
    """A library member identified by a random UUID."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._uuid = uuid.uuid4()
        self._borrowed: list[str] = []
        log(f"User created: {name} with UUID: {self._uuid}")

    def __repr__(self) -> str:
        return f"User(name={self._name!r}, uuid={str(self._uuid)!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def uuid(self) -> uuid.UUID:
        return self._uuid

    @property
    def borrowed_isbns(self) -> tuple[str, ...]:
        return tuple(self._borrowed)

    def borrow_book(self, isbn: str) -> None:
        """Record that this user borrowed the book with the given ISBN."""
        self._borrowed.append(isbn)
        log(f"Book with ISBN: {isbn} borrowed by user: {self._name}")

    def display(self) -> None:
        """Print the user's name, UUID and borrowed ISBNs."""
        log(f"Displaying user: {self._name} with UUID: {self._uuid}")
        print(f"User Name: {self._name}")
        print(f"User UUID: {self._uuid}")
        print("Borrowed Books ISBNs: ")
        for isbn in self._borrowed:
            print(f"- {isbn}")