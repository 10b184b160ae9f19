# ABOUTME: Integration tests for the NdlScraper pipeline over a real httpx client.
# ABOUTME: Tests full flow: NdlHttpClient -> MockTransport -> feed parsing -> BookRecord.

import httpx
import pytest

from ndlbook import BookRecord, NdlScraper, TransportError
from ndlbook.metadata import NdlHttpClient
from tests.fixtures.ndl_responses import (
    COVER_URL,
    FEED_FULL,
    FEED_TWO_DESCRIPTIONS,
    FEED_ZERO_RESULTS,
    ISBN,
)


class NdlStub:
    """MockTransport handler emulating the two NDL endpoints."""

    def __init__(self, feed: str, *, api_status: int = 200, cover_status: int = 200) -> None:
        self.feed = feed
        self.api_status = api_status
        self.cover_status = cover_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/opensearch":
            return httpx.Response(
                self.api_status,
                content=self.feed.encode("utf-8"),
                headers={"Content-Type": "application/xml; charset=UTF-8"},
            )
        if request.url.path.startswith("/thumbnail/"):
            return httpx.Response(self.cover_status, content=b"\xff\xd8\xff")
        return httpx.Response(404)


def _scraper(stub: NdlStub) -> tuple[NdlScraper, NdlHttpClient]:
    client = NdlHttpClient(transport=httpx.MockTransport(stub))
    return NdlScraper(http_client=client, request_factory=client), client


class TestLookupPipeline:
    """Integration tests for the ISBN lookup pipeline."""

    def test_full_record(self) -> None:
        stub = NdlStub(FEED_FULL)
        scraper, client = _scraper(stub)
        with client:
            record = scraper.lookup(ISBN)

        assert record == BookRecord(
            identifier=ISBN,
            title="入門 Python 3",
            description="原タイトル: Introducing Python/索引あり",
            cover_uri=COVER_URL,
        )

    def test_requests_sent_with_isbn_and_user_agent(self) -> None:
        stub = NdlStub(FEED_FULL)
        scraper, client = _scraper(stub)
        with client:
            scraper.lookup(ISBN)

        api_request, cover_request = stub.requests
        assert api_request.method == "GET"
        assert api_request.url.host == "iss.ndl.go.jp"
        assert api_request.url.params["isbn"] == ISBN
        assert cover_request.url.path == f"/thumbnail/{ISBN}"
        assert all(r.headers["user-agent"].startswith("ndlbook/") for r in stub.requests)

    def test_missing_cover(self) -> None:
        scraper, client = _scraper(NdlStub(FEED_TWO_DESCRIPTIONS, cover_status=404))
        with client:
            record = scraper.lookup(ISBN)
        assert record is not None
        assert record.description == "A/B"
        assert record.cover_uri is None

    def test_not_found(self) -> None:
        scraper, client = _scraper(NdlStub(FEED_ZERO_RESULTS))
        with client:
            assert scraper.lookup(ISBN) is None

    def test_service_unavailable(self) -> None:
        scraper, client = _scraper(NdlStub(FEED_FULL, api_status=503))
        with client:
            assert scraper.lookup(ISBN) is None

    def test_scraper_reusable_across_isbns(self) -> None:
        stub = NdlStub(FEED_FULL)
        scraper, client = _scraper(stub)
        with client:
            first = scraper.lookup(ISBN)
            other = scraper.lookup("9780306406157")
            again = scraper.lookup(ISBN)
        assert first == again
        assert other is not None
        assert other.identifier == "9780306406157"
        assert len(stub.requests) == 6


class CountingStream(httpx.SyncByteStream):
    """Thumbnail body that records how many chunks were pulled from it."""

    def __init__(self, chunks: int = 1000, chunk_size: int = 1024) -> None:
        self._chunks = chunks
        self._chunk_size = chunk_size
        self.chunks_read = 0
        self.closed = False

    def __iter__(self):
        for _ in range(self._chunks):
            self.chunks_read += 1
            yield b"\x00" * self._chunk_size

    def close(self) -> None:
        self.closed = True


class TestCoverProbeBody:
    """Integration tests for the cover probe leaving the image body unread."""

    def _scraper_with_cover(self, cover: CountingStream, status: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.startswith("/thumbnail/"):
                return httpx.Response(status, stream=cover)
            return httpx.Response(200, text=FEED_FULL)

        client = NdlHttpClient(transport=httpx.MockTransport(handler))
        return NdlScraper(http_client=client, request_factory=client), client

    def test_cover_body_not_downloaded(self) -> None:
        cover = CountingStream()
        scraper, client = self._scraper_with_cover(cover)
        with client:
            record = scraper.lookup(ISBN)

        assert record is not None
        assert record.cover_uri == COVER_URL
        assert cover.chunks_read == 0

    def test_cover_response_closed(self) -> None:
        cover = CountingStream()
        scraper, client = self._scraper_with_cover(cover, status=404)
        with client:
            record = scraper.lookup(ISBN)

        assert record is not None
        assert record.cover_uri is None
        assert cover.chunks_read == 0
        assert cover.closed


class TestTransportFailures:
    """Integration tests for communication faults through httpx."""

    def test_connect_error_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        client = NdlHttpClient(transport=httpx.MockTransport(handler))
        scraper = NdlScraper(http_client=client, request_factory=client)
        with client, pytest.raises(TransportError) as exc_info:
            scraper.lookup(ISBN)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_cover_timeout_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.startswith("/thumbnail/"):
                raise httpx.ReadTimeout("read timed out", request=request)
            return httpx.Response(200, text=FEED_FULL)

        client = NdlHttpClient(transport=httpx.MockTransport(handler))
        scraper = NdlScraper(http_client=client, request_factory=client)
        with client, pytest.raises(TransportError, match="read timed out"):
            scraper.lookup(ISBN)

    def test_bare_httpx_client_injectable(self) -> None:
        """A plain httpx.Client works as both collaborators."""
        stub = NdlStub(FEED_FULL)
        with httpx.Client(transport=httpx.MockTransport(stub)) as client:
            record = NdlScraper(http_client=client, request_factory=client).lookup(ISBN)
        assert record is not None
        assert record.title == "入門 Python 3"
