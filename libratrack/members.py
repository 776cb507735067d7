"""The register of library members."""

from __future__ import annotations

from typing import Iterator, List, Optional

from libratrack.member import Member

__all__ = ["MemberRegistry"]


class MemberRegistry:
    """An ordered collection of members, looked up by member id."""

    def __init__(self) -> None:
        self._members: List[Member] = []

    def add(self, member: Member) -> None:
        self._members.append(member)

    def _require(self, member_id: str) -> Member:
        member = self.find(member_id)
        if member is None:
            raise KeyError(member_id)
        return member

    def remove(self, member_id: str) -> None:
        """Remove a member; raises KeyError if the id is unknown."""
        self._members.remove(self._require(member_id))

    def find(self, member_id: str) -> Optional[Member]:
        return next((m for m in self._members if m.member_id == member_id), None)

    def active_members(self) -> List[Member]:
        return [m for m in self._members if m.active]

    def members_with_overdue_loans(self) -> List[Member]:
        return [m for m in self._members if m.has_overdue_loans]

    def deactivate(self, member_id: str) -> None:
        """Mark a member inactive; raises KeyError if the id is unknown."""
        self._require(member_id).active = False

    def update_email(self, member_id: str, email: str) -> None:
        """Change one member's e-mail; raises KeyError if the id is unknown."""
        self._require(member_id).email = email

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)