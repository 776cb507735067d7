"""Searching the books of a catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from libratrack.book import Book

__all__ = ["FUZZY_THRESHOLD", "SearchResult", "SearchEngine", "similarity"]

FUZZY_THRESHOLD = 0.7


@dataclass
class SearchResult:
    """A book with a match score between 0.0 and 1.0."""

    book: Book
    score: float


def similarity(a: str, b: str) -> float:
    """Case-insensitive edit-distance similarity: 1.0 identical, 0.0 nothing shared."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    a, b = a.lower(), b.lower()
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            )
        previous = current
    return 1.0 - previous[-1] / max(len(a), len(b))


class SearchEngine:
    """Runs searches over a collection of books (a list or a catalog)."""

    def __init__(self, books: Iterable[Book]) -> None:
        self._books = books

    def fuzzy_match(self, query: str) -> List[SearchResult]:
        """Books whose title is at least ``FUZZY_THRESHOLD`` similar to ``query``."""
        results = []
        for book in self._books:
            score = similarity(query, book.title)
            if score >= FUZZY_THRESHOLD:
                results.append(SearchResult(book, score))
        return results

    def search_by_author(self, query: str) -> List[Book]:
        """Books where any word of the author's name contains ``query``, ignoring case."""
        needle = query.lower()
        return [
            book
            for book in self._books
            if any(needle in word for word in book.author.lower().split())
        ]

    def filter_by_genre(self, genre: str) -> List[Book]:
        wanted = genre.lower()
        return [book for book in self._books if book.genre.lower() == wanted]

    def search_by_year_range(self, start: int, end: int) -> List[Book]:
        """Books published in ``start`` to ``end``, both included."""
        return [
            book for book in self._books if start <= book.publication_year <= end
        ]

    def rank_results(self, results: Iterable[SearchResult]) -> List[SearchResult]:
        """Results sorted best score first."""
        return sorted(results, key=lambda result: result.score, reverse=True)