# ABOUTME: Core record types for book information returned by lookups.
# ABOUTME: BookRecord is the value handed back to callers; BookInfo is its protocol.

from dataclasses import asdict, dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class BookInfo(Protocol):
    """Read-only view of the book information any provider returns."""

    @property
    def identifier(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str | None: ...

    @property
    def cover_uri(self) -> str | None: ...


@dataclass(frozen=True)
class BookRecord:
    """Book information produced by a single lookup.

    identifier is the ISBN exactly as the caller passed it. title is always
    present; a feed without one never yields a record. description and
    cover_uri stay None when the source has nothing for them.
    """

    identifier: str
    title: str
    description: str | None = None
    cover_uri: str | None = None

    @property
    def has_cover(self) -> bool:
        """Whether the cover probe found an image."""
        return self.cover_uri is not None

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)
