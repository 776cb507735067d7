# libratrack

Building blocks for a small lending library: books, a catalog, a member
registry, individual loan records with due dates, overdue notices and
reminders, fuzzy search over books, and circulation statistics.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

Dates are plain `"YYYY-MM-DD"` strings throughout.

```python
from libratrack.book import Book
from libratrack.catalog import Catalog
from libratrack.loan import Loan
from libratrack.member import Member, MemberType
from libratrack.members import MemberRegistry
from libratrack.search import SearchEngine
from libratrack import notifications, statistics

catalog = Catalog()
catalog.add_book(Book("9780132350884", "Clean Code", "Robert C. Martin", 2008, 3, "Programming"))

registry = MemberRegistry()
registry.add(Member("M001", "Alice", "Smith", "alice@example.com",
                    MemberType.STUDENT, "2099-12-31"))

loan = Loan("L00001", "9780132350884", "M001", "2026-03-01")
print(loan.due_date())          # 2026-03-15
loan.mark_returned("2026-03-10")
print(loan)                     # Loan[L00001] ... checked out: 03/01/2026 (returned)

engine = SearchEngine(catalog)
print([r.book.title for r in engine.fuzzy_match("Clean Cod")])

print(statistics.trend([loan]))  # {'2026-03': 1}
print(notifications.overdue_notices(registry, [loan]))
```

## Modules

- `libratrack.dates` – `add_days`, `days_between`, `is_leap_year`,
  `format_date`, `parse_date` (raises `ValueError` on a bad date) and
  `today`.
- `libratrack.book` – `Book`, with `is_available`, `validate_isbn`
  (thirteen digits), `decrement_copies`, `increment_copies`, `full_title`
  (`"<title> by <author>"`) and `increment_borrow_count`. Setting a
  publication year of zero or less raises `ValueError`.
- `libratrack.loan` – `Loan`, due 14 days after checkout, with `due_date`,
  `days_overdue` (never negative), `is_returned`, `is_overdue` and
  `mark_returned`; `str(loan)` gives a one-line description with the
  checkout date as MM/DD/YYYY.
- `libratrack.member` – `MemberType` and `Member` (at most
  `Member.MAX_LOANS` loans), with `can_borrow`, `is_expired`,
  `display_name`, `membership_status` (`"Inactive"`, `"Expired"` or
  `"Active"`), `add_loan` and `remove_loan`.
- `libratrack.catalog` – `Catalog`: `add_book` (raises `ValueError` on a
  duplicate ISBN), `remove_book` (raises `KeyError`), `remove_book_at`
  (raises `IndexError`), `find_by_isbn`, `search_by_title`,
  `search_by_author`, `available_books`, `books_by_genre`, `sort_by_title`,
  `sort_by_author`; supports `len()` and iteration.
- `libratrack.members` – `MemberRegistry`: `add`, `remove`, `find`,
  `active_members`, `members_with_overdue_loans`, `deactivate`,
  `update_email` (the last three and `remove` raise `KeyError` for an
  unknown id); supports `len()` and iteration.
- `libratrack.notifications` – `Notice`, `overdue_notices`,
  `format_message`, `schedule_reminders`.
- `libratrack.search` – `similarity`, `SearchResult` and `SearchEngine`
  (`fuzzy_match` at a 0.7 threshold, `search_by_author`,
  `filter_by_genre`, `search_by_year_range` with both ends included,
  `rank_results` best first).
- `libratrack.statistics` – `average_loan_duration`, `popularity_score`,
  `most_active_month`, `trend`, `count_overdue_loans`,
  `most_active_member`.

## What it does not do

- There is no command-line program or interactive menu; the package is
  used from Python only.
- There is no loan desk tying the pieces together: checking a book out of
  the catalog, returning it, renewing it and keeping member and copy
  counts in step are left to the caller, who creates and updates `Loan`
  records directly.
- It does not compute fines or produce formatted reports.
- Nothing is stored; all data lives in memory for the life of the process.