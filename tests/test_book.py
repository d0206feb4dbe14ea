import pytest

from librarykeeper.book import NO_BORROWER, Book, BookError


def test_borrowed_without_borrower_raises():
    with pytest.raises(BookError, match=NO_BORROWER):
        Book("1984", "George Orwell", "1234-5678", True, "")


def test_creation_logs_and_keeps_fields(capsys):
    book = Book("1984", "George Orwell", "1234-5678", False, "")
    out = capsys.readouterr().out
    assert "Book created: 1984 by George Orwell" in out
    assert (book.title, book.author, book.isbn) == ("1984", "George Orwell", "1234-5678")
    assert book.is_borrowed is False
    assert book.borrower == ""


def test_set_borrowed_updates_state(capsys):
    book = Book("1984", "George Orwell", "1234-5678")
    book.set_borrowed(True, "Toto")
    assert book.is_borrowed is True
    assert book.borrower == "Toto"
    assert "Book 1984 borrow status changed to borrowed" in capsys.readouterr().out
    book.set_borrowed(False)
    assert book.is_borrowed is False
    assert book.borrower == ""


def test_property_setters_log_warnings(capsys):
    book = Book("1984", "George Orwell", "1234-5678")
    capsys.readouterr()
    book.title = "Animal Farm"
    book.author = "Orwell"
    book.isbn = "9999"
    book.borrower = "Tata"
    out = capsys.readouterr().out
    assert book.title == "Animal Farm"
    assert book.author == "Orwell"
    assert book.isbn == "9999"
    assert book.borrower == "Tata"
    assert "Book title changed to: Animal Farm" in out
    assert "Book borrower changed to: Tata" in out
    assert "\x1b[1;33m" in out


def test_display_available(capsys):
    book = Book("1984", "George Orwell", "1234-5678")
    capsys.readouterr()
    book.display()
    out = capsys.readouterr().out
    assert "Book ISBN: 1234-5678" in out
    assert "Book is available for borrowing." in out
    assert "Book borrower:" not in out


def test_display_borrowed(capsys):
    book = Book("1984", "George Orwell", "1234-5678")
    book.set_borrowed(True, "Titi")
    capsys.readouterr()
    book.display()
    out = capsys.readouterr().out
    assert "Book is borrowed" in out
    assert "Book borrower: Titi" in out