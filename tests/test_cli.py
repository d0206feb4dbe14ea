from librarykeeper.cli import main


def test_main_lends_one_book_per_user(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Book borrowed: 1984 by Toto" in out
    assert "Book borrowed: To Kill a Mockingbird by Tata" in out
    assert "Book borrowed: The Great Gatsby by Titi" in out
    assert "An error occurred" not in out


def test_main_displays_everything(capsys):
    main()
    out = capsys.readouterr().out
    assert out.count("User Name: ") == 3
    assert out.count("Book title: ") == 3
    assert "Book is available for borrowing." not in out
    for isbn in ("1234-5678", "2345-6789", "3456-7890"):
        assert f"- {isbn}" in out