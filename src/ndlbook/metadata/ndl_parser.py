# ABOUTME: Parsing functions for NDL OpenSearch XML feeds.
# ABOUTME: Extracts the result count and the first item's Dublin Core fields.

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

OPENSEARCH_NAMESPACES = (
    "http://a9.com/-/spec/opensearchrss/1.0/",
    "http://a9.com/-/spec/opensearch/1.1/",
)
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"

DESCRIPTION_SEPARATOR = "/"


class FeedParseError(ValueError):
    """Raised when an OpenSearch feed does not have the expected structure."""


@dataclass
class OpenSearchFeed:
    """The parts of an NDL OpenSearch response that lookups consume.

    dc_fields maps Dublin Core local names (title, description, creator, ...)
    of the first item to their values in document order. It is empty when
    the feed has no results.
    """

    total_results: int
    dc_fields: dict[str, list[str]] = field(default_factory=dict)

    @property
    def title(self) -> str | None:
        """The first dc:title, or None if it is absent or blank."""
        titles = self.dc_fields.get("title")
        if not titles or not titles[0]:
            return None
        return titles[0]

    @property
    def description(self) -> str | None:
        """All description fragments joined with '/', or None if absent."""
        descriptions = self.dc_fields.get("description")
        if descriptions is None:
            return None
        return DESCRIPTION_SEPARATOR.join(descriptions)


def _find_total_results(channel: ET.Element) -> int:
    """Read openSearch:totalResults from the channel.

    A missing element counts as zero results.
    """
    for namespace in OPENSEARCH_NAMESPACES:
        element = channel.find(f"{{{namespace}}}totalResults")
        if element is not None:
            text = (element.text or "").strip()
            try:
                return int(text)
            except ValueError as exc:
                raise FeedParseError(f"totalResults is not an integer: {text!r}") from exc
    return 0


def parse_dc_fields(item: ET.Element) -> dict[str, list[str]]:
    """Collect the dc: children of an item into a field -> values mapping.

    Repeated elements keep their document order. Elements from other
    namespaces (dcterms, dcndl, xsi, ...) are ignored.
    """
    prefix = f"{{{DC_NAMESPACE}}}"
    fields: dict[str, list[str]] = {}
    for child in item:
        if not isinstance(child.tag, str) or not child.tag.startswith(prefix):
            continue
        name = child.tag[len(prefix):]
        fields.setdefault(name, []).append((child.text or "").strip())
    return fields


def parse_opensearch_feed(xml_text: str | bytes) -> OpenSearchFeed:
    """Parse an NDL OpenSearch RSS response.

    Raises:
        FeedParseError: If the document is not well-formed XML, has no
            channel, or reports results but carries no item.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise FeedParseError(f"Malformed XML: {exc}") from exc

    channel = root.find("channel")
    if channel is None:
        raise FeedParseError("Feed has no channel element")

    total_results = _find_total_results(channel)
    if total_results == 0:
        return OpenSearchFeed(total_results=0)

    item = channel.find("item")
    if item is None:
        raise FeedParseError(f"Feed reports {total_results} result(s) but has no item")

    return OpenSearchFeed(total_results=total_results, dc_fields=parse_dc_fields(item))
