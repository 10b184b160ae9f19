# ABOUTME: Metadata package for book information lookups.
# ABOUTME: Exports the BookRecord value, the provider protocol, and the NDL scraper.

from ndlbook.metadata.http import NdlHttpClient, TransportError
from ndlbook.metadata.ndl import NdlScraper
from ndlbook.metadata.provider import BookInfoProvider
from ndlbook.metadata.types import BookInfo, BookRecord

__all__ = [
    "BookInfo",
    "BookInfoProvider",
    "BookRecord",
    "NdlHttpClient",
    "NdlScraper",
    "TransportError",
]
