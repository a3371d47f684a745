"""Encoding of optional list parameters into URL query strings."""

from dataclasses import dataclass, field, fields
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def query_field(name: str):
    """Declare an optional ListOptions attribute sent under a different query name."""
    return field(default=None, metadata={"query": name})


@dataclass
class ListOptions:
    """
    Base class for optional list parameters.

    Subclasses declare every attribute as optional with a None default.
    Unset attributes are left out of the query string entirely.
    """

    def to_params(self) -> dict[str, str]:
        """Return the set options as query parameters."""
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            params[f.metadata.get("query", f.name)] = _format_value(value)
        return params


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def add_options(url: str, options: ListOptions | None) -> str:
    """
    Apply list options to a URL as query parameters.

    Args:
        url: Endpoint URL, possibly already carrying a query string
        options: Options to encode, or None

    Returns:
        URL with parameters sorted by name and form-encoded
    """
    if options is None:
        return url

    parts = urlsplit(url)
    params = dict(parse_qsl(parts.query, keep_blank_values=True))
    params.update(options.to_params())

    query = urlencode(sorted(params.items()))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
