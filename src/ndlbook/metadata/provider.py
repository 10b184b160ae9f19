# ABOUTME: BookInfoProvider protocol defining the contract for book information sources.
# ABOUTME: The NDL scraper implements it; other catalog APIs can plug in the same way.

from typing import Protocol, runtime_checkable

from ndlbook.metadata.types import BookRecord


@runtime_checkable
class BookInfoProvider(Protocol):
    """Protocol for identifier-based book information lookups.

    supports() is a cheap local check on the identifier. lookup() performs
    the network calls and returns None when the source has no match.
    """

    @property
    def name(self) -> str: ...

    def supports(self, identifier: str) -> bool: ...

    def lookup(self, identifier: str) -> BookRecord | None: ...
