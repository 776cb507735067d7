"""Books, catalog, members, loan records, notices, search and statistics for a small lending library."""

__version__ = "1.0.0"

__all__ = [
    "book",
    "catalog",
    "dates",
    "loan",
    "member",
    "members",
    "notifications",
    "search",
    "statistics",
]