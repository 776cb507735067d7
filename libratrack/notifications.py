"""Overdue notices and due-date reminders for members."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from libratrack.dates import days_between, today
from libratrack.loan import Loan
from libratrack.member import Member

__all__ = [
    "OVERDUE_MESSAGE",
    "Notice",
    "overdue_notices",
    "format_message",
    "schedule_reminders",
]

OVERDUE_MESSAGE = "You have overdue items. Please return them immediately."


@dataclass(frozen=True)
class Notice:
    """A message addressed to one member."""

    member_id: str
    message: str


def format_message(member: Member, body: str) -> str:
    """Address ``body`` to the member by display name."""
    return f"Dear {member.display_name()},\n{body}"


def overdue_notices(members: Iterable[Member], loans: Iterable[Loan]) -> List[Notice]:
    """One notice for each member flagged overdue or holding an overdue loan."""
    overdue_ids = {loan.member_id for loan in loans if loan.is_overdue()}
    return [
        Notice(member.member_id, format_message(member, OVERDUE_MESSAGE))
        for member in members
        if member.has_overdue_loans or member.member_id in overdue_ids
    ]


def schedule_reminders(
    loans: Iterable[Loan], members: Iterable[Member], days_before: int = 3
) -> List[str]:
    """Member ids of open loans due exactly ``days_before`` days from today."""
    current = today()
    return [
        loan.member_id
        for loan in loans
        if not loan.is_returned()
        and days_between(current, loan.due_date()) == days_before
    ]