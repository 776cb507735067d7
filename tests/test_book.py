import pytest

from libratrack.book import Book


def make_book(isbn="9780000000001"):
    return Book(isbn, "Test Book", "Author A", 2020, 1)


def test_is_available_false_when_zero_copies():
    book = make_book()
    book.decrement_copies()
    assert book.is_available() is False


def test_is_available_true_with_copies():
    assert make_book().is_available() is True


def test_validate_isbn_rejects_twelve_digits():
    assert make_book("978000000000").validate_isbn() is False


def test_validate_isbn_accepts_thirteen_digits():
    assert make_book("9780000000001").validate_isbn() is True


def test_validate_isbn_rejects_non_digits():
    assert make_book("97800000000X1").validate_isbn() is False


def test_decrement_copies_does_not_go_below_zero():
    book = make_book()
    book.decrement_copies()
    book.decrement_copies()
    assert book.available_copies == 0


def test_increment_copies_capped_at_total():
    book = Book("9780000000001", "T", "A", 2020, 2)
    book.decrement_copies()
    book.increment_copies()
    book.increment_copies()
    assert book.available_copies == 2


def test_set_publication_year_rejects_zero():
    book = make_book()
    with pytest.raises(ValueError):
        book.publication_year = 0
    assert book.publication_year == 2020


def test_set_publication_year_rejects_negative():
    book = make_book()
    with pytest.raises(ValueError):
        book.publication_year = -500
    assert book.publication_year == 2020


def test_set_publication_year_accepts_positive():
    book = make_book()
    book.publication_year = 1999
    assert book.publication_year == 1999


def test_full_title_format_is_title_by_author():
    book = Book("9780000000001", "Clean Code", "Robert Martin", 2008, 1)
    assert book.full_title() == "Clean Code by Robert Martin"


def test_increment_borrow_count():
    book = make_book()
    book.increment_borrow_count()
    book.increment_borrow_count()
    assert book.borrow_count == 2


def test_genre_defaults_to_empty():
    assert make_book().genre == ""