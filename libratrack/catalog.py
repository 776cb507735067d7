"""The collection of books the library holds."""

from __future__ import annotations

from typing import Iterator, List, Optional

from libratrack.book import Book

__all__ = ["Catalog"]


class Catalog:
    """An ordered collection of books keyed by unique ISBN."""

    def __init__(self) -> None:
        self._books: List[Book] = []

    def add_book(self, book: Book) -> None:
        """Add a book; raises ValueError if its ISBN is already present."""
        if self.find_by_isbn(book.isbn) is not None:
            raise ValueError(f"a book with ISBN {book.isbn} is already in the catalog")
        self._books.append(book)

    def remove_book(self, isbn: str) -> None:
        """Remove the book with ``isbn``; raises KeyError if there is none."""
        book = self.find_by_isbn(isbn)
        if book is None:
            raise KeyError(isbn)
        self._books.remove(book)

    def remove_book_at(self, index: int) -> None:
        """Remove the book at a position; raises IndexError if out of range."""
        if not 0 <= index < len(self._books):
            raise IndexError(f"catalog index out of range: {index}")
        del self._books[index]

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        return next((book for book in self._books if book.isbn == isbn), None)

    def search_by_title(self, query: str) -> List[Book]:
        """Books whose title contains ``query``, ignoring case."""
        needle = query.lower()
        return [book for book in self._books if needle in book.title.lower()]

    def search_by_author(self, query: str) -> List[Book]:
        """Books whose author contains ``query``, ignoring case."""
        needle = query.lower()
        return [book for book in self._books if needle in book.author.lower()]

    def available_books(self) -> List[Book]:
        return [book for book in self._books if book.available_copies > 0]

    def books_by_genre(self, genre: str) -> List[Book]:
        wanted = genre.lower()
        return [book for book in self._books if book.genre.lower() == wanted]

    def sort_by_title(self) -> None:
        self._books.sort(key=lambda book: book.title)

    def sort_by_author(self) -> None:
        self._books.sort(key=lambda book: book.author)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)