"""A single loan of a book to a member."""

from __future__ import annotations

from dataclasses import dataclass

from libratrack.dates import add_days, days_between, parse_date, today

__all__ = ["LOAN_PERIOD_DAYS", "Loan"]

LOAN_PERIOD_DAYS = 14


@dataclass
class Loan:
    """A checkout record; dates are ``YYYY-MM-DD`` strings."""

    loan_id: str
    book_isbn: str
    member_id: str
    checkout_date: str
    return_date: str = ""
    fine_amount: float = 0.0
    returned: bool = False

    def due_date(self) -> str:
        """Return the date the loan falls due."""
        return add_days(self.checkout_date, LOAN_PERIOD_DAYS)

    def days_overdue(self) -> int:
        """Days past the due date, up to the return date or today; never negative."""
        reference = self.return_date if self.returned else today()
        return max(0, days_between(self.due_date(), reference))

    def is_returned(self) -> bool:
        return self.returned

    def is_overdue(self) -> bool:
        """Return True if the loan is still out and past its due date."""
        if self.returned:
            return False
        return days_between(self.due_date(), today()) > 0

    def mark_returned(self, return_date: str) -> None:
        self.return_date = return_date
        self.returned = True

    def __str__(self) -> str:
        checkout = parse_date(self.checkout_date)
        state = "returned" if self.returned else "active"
        return (
            f"Loan[{self.loan_id}] {self.book_isbn} -> {self.member_id} "
            f"checked out: {checkout.month:02d}/{checkout.day:02d}/{checkout.year} "
            f"({state})"
        )