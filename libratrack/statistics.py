"""Statistics over loans, books and members."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Optional

from libratrack.book import Book
from libratrack.dates import days_between
from libratrack.loan import Loan
from libratrack.member import Member

__all__ = [
    "average_loan_duration",
    "popularity_score",
    "most_active_month",
    "trend",
    "count_overdue_loans",
    "most_active_member",
]


def average_loan_duration(loans: Iterable[Loan]) -> float:
    """Mean length in days of returned loans; 0.0 if none were returned."""
    durations = [
        days_between(loan.checkout_date, loan.return_date)
        for loan in loans
        if loan.is_returned()
    ]
    if not durations:
        return 0.0
    return sum(durations) / len(durations)


def popularity_score(book: Book, total_members: int) -> float:
    """Borrow count per member; 0.0 when there are no members."""
    if total_members == 0:
        return 0.0
    return book.borrow_count / total_members


def _checkout_months(loans: Iterable[Loan]) -> Iterable[int]:
    return (
        int(loan.checkout_date[5:7]) for loan in loans if len(loan.checkout_date) >= 7
    )


def most_active_month(loans: Iterable[Loan]) -> int:
    """Month (1 to 12) with the most checkouts; the earliest wins ties, 1 if none."""
    counts = Counter(_checkout_months(loans))
    return max(range(1, 13), key=lambda month: (counts[month], -month))


def trend(loans: Iterable[Loan]) -> Dict[str, int]:
    """Checkouts per ``YYYY-MM`` period, in period order."""
    counts = Counter(
        loan.checkout_date[:7] for loan in loans if len(loan.checkout_date) >= 7
    )
    return dict(sorted(counts.items()))


def count_overdue_loans(loans: Iterable[Loan]) -> int:
    return sum(1 for loan in loans if loan.is_overdue())


def most_active_member(members: Iterable[Member]) -> Optional[Member]:
    """The member holding the most loans (the first on a tie), or None."""
    return max(members, key=lambda member: member.active_loan_count, default=None)