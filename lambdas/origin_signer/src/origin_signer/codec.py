"""Conversions between CloudFront multi-value headers/query strings and flat mappings."""

from ._types import CloudFrontHeaders, HeaderBag, QueryParameters


def to_header_bag(headers: CloudFrontHeaders) -> HeaderBag:
    """Flatten CloudFront headers, keeping the first value for each name.

    Later values under the same name are discarded. Missing values become "".
    """
    bag: HeaderBag = {}
    for name, entries in headers.items():
        value = entries[0].get("value") if entries else None
        bag[name.lower()] = value or ""
    return bag


def to_multi_value_headers(bag: HeaderBag) -> CloudFrontHeaders:
    """Expand a header bag back into CloudFront's `{name: [{key, value}]}` form."""
    return {name: [{"key": name, "value": value}] for name, value in bag.items()}


def parse_query_string(raw: str) -> QueryParameters:
    """Parse a raw query string without URL-decoding it.

    Pairs without `=` or with an empty key are dropped. `key=` maps to None and
    repeated keys collect into a list in arrival order.
    """
    query: QueryParameters = {}
    for pair in raw.split("&"):
        key, sep, value = pair.partition("=")
        if not key or not sep:
            continue

        parsed = value or None
        if key not in query:
            query[key] = parsed
            continue

        existing = query[key]
        if isinstance(existing, list):
            existing.append(value)
        else:
            query[key] = [existing or "", value]
    return query


def serialize_query_parameters(query: QueryParameters) -> str:
    """Join query parameters back into `key=value&...` form.

    Values are NOT percent-encoded: the result describes an in-memory object,
    not a wire string. Encoding happens once, inside the signer's canonical
    query. Encoding here as well would double-encode values holding `&` or `=`.
    """
    segments: list[str] = []
    for key, value in query.items():
        if value is None:
            segments.append(f"{key}=")
        elif isinstance(value, list):
            segments.extend(f"{key}={item}" for item in value)
        else:
            segments.append(f"{key}={value}")
    return "&".join(segments)
