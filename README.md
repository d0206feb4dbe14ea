# librarykeeper

A small in-memory library catalogue. It keeps a list of books and a list of
users, lets a user borrow a book by ISBN, and reports what happens through
coloured, timestamped log lines on standard output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
librarykeeper
```

Sets up a sample library with three books and three users, lends one book to
each user in turn, then prints every user and every book. Any error raised
along the way is logged as an error line rather than raised; the command
always exits with status 0.

```
librarykeeper-log-demo
```

Prints one sample message at each log level (info, error, warning).

Both commands take no options.

## Using the library

```python
from librarykeeper.book import Book
from librarykeeper.user import User
from librarykeeper.library import Library, LibraryError

library = Library()

library.add_book(Book("1984", "George Orwell", "1234-5678"))
alice = User("Alice")
library.add_user(alice)

library.borrow_book(alice.uuid, "1234-5678")

book = library.find_book("1984")
print(book.is_borrowed, book.borrower)   # True Alice
print(alice.borrowed_isbns)              # ('1234-5678',)

try:
    library.borrow_book(alice.uuid, "1234-5678")
except LibraryError as exc:
    print(exc)   # Book is already borrowed by another user.
```

### Books (`librarykeeper.book`)

`Book(title, author, isbn, is_borrowed=False, borrower="")` creates a book.
If `is_borrowed` is true and `borrower` is empty, `BookError` is raised with
the message `Error, no borrower specified`.

- `title`, `author`, `isbn` and `borrower` are properties; assigning to any of
  them logs a warning line describing the change.
- `is_borrowed` is a read-only property.
- `set_borrowed(is_borrowed, borrower="")` sets the borrow status and the
  borrower together, and logs the new status.
- `display()` logs the book's title, author, ISBN and status, and the borrower
  if it is out.

### Users (`librarykeeper.user`)

`User(name)` creates a user with a freshly generated random UUID.

- `name` and `uuid` (a `uuid.UUID`) are read-only properties.
- `borrowed_isbns` is a tuple of the ISBNs the user has borrowed, in order.
- `borrow_book(isbn)` records a borrowed ISBN.
- `display()` prints the user's name, UUID and borrowed ISBNs.

The module also defines a `UserError` exception class.

### Library (`librarykeeper.library`)

`Library()` holds books and users in the order they were added. Membership is
by identity: two distinct `Book` objects with the same details are different
books.

- `add_book`, `add_user`: raise `LibraryError` if that same object is already
  present.
- `remove_book`, `remove_user`: raise `LibraryError` if the object is not
  present.
- `find_book(title)`, `find_book_by_isbn(isbn)`, `find_user(name)`: return the
  first match, or raise `LibraryError`.
- `find_user_by_id(user_id)`: `user_id` may be a `uuid.UUID` or its 16 raw
  bytes; returns the matching user or raises `LibraryError`.
- `borrow_book(user_id, isbn)`: marks the book as borrowed by that user and
  records the ISBN on the user; raises `LibraryError` if the user or book is
  unknown or the book is already out.
- `user_uuids()` and `book_isbns()`: list the users' UUIDs and the books'
  ISBNs, in insertion order.
- `display_users()` and `display_books()`: display every user and every book.

Error messages are available as module constants: `BOOK_ALREADY_EXISTS`,
`BOOK_NOT_FOUND`, `USER_ALREADY_EXISTS`, `USER_NOT_FOUND` and
`BOOK_ALREADY_BORROWED`.

### Logging (`librarykeeper.log`)

`log`, `log_warning` and `log_error` each write one line to standard output:
a timestamp in brackets, coloured blue, yellow or red by level, followed by
the message.

## What it does not do

Everything is held in memory for the life of the process: there is no saving
to or loading from disk, no database, and no interactive command for managing
books or users. There is also no way to return a borrowed book other than
calling `Book.set_borrowed(False)` yourself, which does not update the user's
list of borrowed ISBNs.