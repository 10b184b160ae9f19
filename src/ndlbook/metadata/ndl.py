# ABOUTME: National Diet Library book information provider.
# ABOUTME: Looks up an ISBN via the NDL OpenSearch API and probes the NDL thumbnail service.

import logging

import httpx

from ndlbook.metadata.http import RequestFactory, RequestSender, TransportError
from ndlbook.metadata.isbn import is_isbn
from ndlbook.metadata.ndl_parser import FeedParseError, parse_opensearch_feed
from ndlbook.metadata.types import BookRecord

logger = logging.getLogger(__name__)

API_URI = "https://iss.ndl.go.jp/api/opensearch"
COVER_URI = "https://iss.ndl.go.jp/thumbnail"


class NdlScraper:
    """Book information provider backed by the NDL OpenSearch API.

    Each lookup issues two GET requests, one for the metadata feed and one
    for the cover thumbnail. Holds no state between calls beyond the
    injected collaborators.
    """

    def __init__(self, http_client: RequestSender, request_factory: RequestFactory) -> None:
        self._http = http_client
        self._requests = request_factory

    @property
    def name(self) -> str:
        return "ndl"

    def supports(self, identifier: str) -> bool:
        return is_isbn(identifier)

    def lookup(self, identifier: str) -> BookRecord | None:
        """Look up a book by ISBN.

        Returns None when the metadata request is not a 200, when the feed
        reports no results, or when the feed cannot be parsed. The cover
        probe only decides whether cover_uri is set.

        Raises:
            TransportError: If either request cannot complete.
        """
        response = self._get(self.api_uri(identifier))
        has_cover = self._probe(self.cover_uri(identifier))

        if response.status_code != 200:
            logger.info("NDL returned HTTP %d for %s", response.status_code, identifier)
            return None

        try:
            feed = parse_opensearch_feed(response.content)
        except FeedParseError as exc:
            logger.warning("Unreadable NDL feed for %s: %s", identifier, exc)
            return None

        if feed.total_results == 0:
            logger.info("No NDL results for %s", identifier)
            return None

        title = feed.title
        if title is None:
            logger.warning("NDL item for %s has no usable dc:title", identifier)
            return None

        cover_uri = self.cover_uri(identifier) if has_cover else None

        return BookRecord(
            identifier=identifier,
            title=title,
            description=feed.description,
            cover_uri=cover_uri,
        )

    def _probe(self, url: str) -> bool:
        """Return True if url answers 200, without reading the response body."""
        response = self._get(url, stream=True)
        try:
            return response.status_code == 200
        finally:
            response.close()

    def _get(self, url: str, *, stream: bool = False) -> httpx.Response:
        request = self._requests.build_request("GET", url)
        try:
            response = self._http.send(request, stream=stream)
        except httpx.HTTPError as exc:
            raise TransportError(f"Request failed: {url}: {exc}") from exc
        logger.debug("GET %s -> %d", url, response.status_code)
        return response

    @staticmethod
    def api_uri(isbn: str) -> str:
        """Return the OpenSearch endpoint URL for an ISBN."""
        return f"{API_URI}?isbn={isbn}"

    @staticmethod
    def cover_uri(isbn: str) -> str:
        """Return the thumbnail URL for an ISBN."""
        return f"{COVER_URI}/{isbn}"
