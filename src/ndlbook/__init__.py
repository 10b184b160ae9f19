# ABOUTME: ndlbook - book metadata lookup against the National Diet Library.
# ABOUTME: Exposes the NDL scraper and the BookRecord it produces.

from ndlbook.metadata import BookRecord, NdlScraper, TransportError

__all__ = ["BookRecord", "NdlScraper", "TransportError"]
