"""Library members."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, List

from libratrack.dates import days_between, today

__all__ = ["MemberType", "Member"]


class MemberType(enum.Enum):
    STUDENT = "student"
    FACULTY = "faculty"
    SENIOR = "senior"
    GUEST = "guest"


@dataclass
class Member:
    """A library member; ``expiry_date`` is a ``YYYY-MM-DD`` string."""

    MAX_LOANS: ClassVar[int] = 5

    member_id: str
    first_name: str
    last_name: str
    email: str
    member_type: MemberType
    expiry_date: str
    active: bool = True
    has_overdue_loans: bool = False
    loan_ids: List[str] = field(default_factory=list)

    @property
    def active_loan_count(self) -> int:
        return len(self.loan_ids)

    def can_borrow(self) -> bool:
        """Return True if the member is active, unexpired and under the loan limit."""
        if not self.active or self.is_expired():
            return False
        return self.active_loan_count < self.MAX_LOANS

    def is_expired(self) -> bool:
        return days_between(today(), self.expiry_date) < 0

    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def membership_status(self) -> str:
        """Return ``"Inactive"``, ``"Expired"`` or ``"Active"``."""
        if not self.active:
            return "Inactive"
        if self.is_expired():
            return "Expired"
        return "Active"

    def add_loan(self, loan_id: str) -> None:
        self.loan_ids.append(loan_id)

    def remove_loan(self, loan_id: str) -> None:
        """Forget a loan; does nothing if the member does not hold it."""
        if loan_id in self.loan_ids:
            self.loan_ids.remove(loan_id)