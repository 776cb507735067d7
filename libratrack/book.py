"""A book held in the library catalog."""

from __future__ import annotations

__all__ = ["Book"]


class Book:
    """A title in the catalog together with its copy and borrow counts."""

    def __init__(
        self,
        isbn: str,
        title: str,
        author: str,
        publication_year: int,
        total_copies: int,
        genre: str = "",
    ) -> None:
        self.isbn = isbn
        self.title = title
        self.author = author
        self.publication_year = publication_year
        self.total_copies = total_copies
        self.available_copies = total_copies
        self.genre = genre
        self.borrow_count = 0

    @property
    def publication_year(self) -> int:
        return self._publication_year

    @publication_year.setter
    def publication_year(self, year: int) -> None:
        if year <= 0:
            raise ValueError(f"publication year must be positive, got {year}")
        self._publication_year = year

    def is_available(self) -> bool:
        """Return True if at least one copy can be lent."""
        return self.available_copies > 0

    def validate_isbn(self) -> bool:
        """Return True if the ISBN is exactly thirteen digits."""
        return len(self.isbn) == 13 and self.isbn.isascii() and self.isbn.isdigit()

    def decrement_copies(self) -> None:
        """Take one copy off the shelf; never goes below zero."""
        if self.available_copies > 0:
            self.available_copies -= 1

    def increment_copies(self) -> None:
        """Put one copy back; never exceeds the total."""
        if self.available_copies < self.total_copies:
            self.available_copies += 1

    def full_title(self) -> str:
        """Return ``"<title> by <author>"``."""
        return f"{self.title} by {self.author}"

    def increment_borrow_count(self) -> None:
        self.borrow_count += 1

    def __repr__(self) -> str:
        return (
            f"Book(isbn={self.isbn!r}, title={self.title!r}, author={self.author!r}, "
            f"publication_year={self.publication_year!r}, "
            f"total_copies={self.total_copies!r}, genre={self.genre!r})"
        )