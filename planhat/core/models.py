"""
Record base class and response records shared by all resources.

Records are dataclasses whose attributes default to None. A None
attribute is "unset" and is left out of the JSON payload, so callers can
send zero values (0, "", False) without them being confused with absence.
"""

import re
import types
from dataclasses import MISSING, dataclass, field, fields
from datetime import datetime
from functools import lru_cache
from typing import Any, Callable, Mapping, Union, get_args, get_origin, get_type_hints

from .errors import DecodeError

# Seconds with an arbitrary-length fraction, e.g. "10:00:00.12" or "10:00:00.123456789"
_FRACTION = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


@dataclass(frozen=True)
class Codec:
    """Pair of functions converting a field between JSON and Python."""
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]


def json_field(name: str, codec: Codec | None = None, default: Any = None, default_factory: Any = MISSING):
    """
    Declare a record attribute backed by a JSON key.

    Args:
        name: JSON key on the wire (e.g. "_id", "externalId")
        codec: Optional converter for non-primitive values
        default: Default value when the key is absent
        default_factory: Factory for mutable defaults
    """
    metadata = {"json": name, "codec": codec}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as sent by the API, including a trailing Z."""
    if not isinstance(value, str):
        raise TypeError(f"expected ISO-8601 string, got {type(value).__name__}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    # fromisoformat on 3.10 only takes 3 or 6 fractional digits
    value = _FRACTION.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", value, count=1)
    return datetime.fromisoformat(value)


def format_datetime(value: datetime) -> str:
    return value.isoformat()


DATETIME = Codec(decode=parse_datetime, encode=format_datetime)


def nested(record_cls: type["JSONModel"]) -> Codec:
    """Codec for an attribute holding a single nested record."""
    return Codec(decode=record_cls.from_dict, encode=lambda value: value.to_dict())


def nested_list(record_cls: type["JSONModel"]) -> Codec:
    """Codec for an attribute holding a list of nested records."""
    return Codec(
        decode=record_cls.from_list,
        encode=lambda values: [value.to_dict() for value in values],
    )


def matches_type(value: Any, annotation: Any) -> bool:
    """
    Check a decoded JSON value against a primitive annotation.

    Only bool, int, float, str, list and dict (plus Optional and the
    element type of lists) are checked. Anything else, including Any,
    is accepted as-is.
    """
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) != 1:
            return True
        return matches_type(value, args[0])
    if origin is list:
        if not isinstance(value, list):
            return False
        args = get_args(annotation)
        return not args or all(matches_type(item, args[0]) for item in value)
    if origin is dict:
        return isinstance(value, dict)

    # bool is a subclass of int, so it is ruled out explicitly for numbers
    if annotation is bool:
        return isinstance(value, bool)
    if annotation is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if annotation is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if annotation in (str, list, dict):
        return isinstance(value, annotation)
    return True


@lru_cache(maxsize=None)
def _field_types(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


class JSONModel:
    """Mixin giving dataclass records JSON conversion."""

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a JSON-ready dict, omitting unset attributes."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            codec = f.metadata.get("codec")
            key = f.metadata.get("json", f.name)
            data[key] = codec.encode(value) if codec else value
        return data

    @classmethod
    def from_dict(cls, data: Any):
        """
        Build a record from decoded JSON.

        Unknown keys are ignored. Keys that are absent or null leave the
        attribute at its default.

        Raises:
            DecodeError: If data is not an object, a value has the wrong shape,
                or a value does not match its attribute's declared type
        """
        if not isinstance(data, Mapping):
            raise DecodeError(
                f"expected JSON object for {cls.__name__}, got {type(data).__name__}"
            )

        types_by_name = _field_types(cls)
        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            value = data.get(key)
            if value is None:
                continue
            codec = f.metadata.get("codec")
            if codec is not None:
                try:
                    value = codec.decode(value)
                except (TypeError, ValueError) as e:
                    raise DecodeError(f"invalid value for {cls.__name__}.{f.name}: {e}") from e
            elif not matches_type(value, types_by_name[f.name]):
                raise DecodeError(
                    f"invalid value for {cls.__name__}.{f.name}: "
                    f"got {type(value).__name__} {value!r}"
                )
            kwargs[f.name] = value

        return cls(**kwargs)

    @classmethod
    def from_list(cls, data: Any) -> list:
        """Build a list of records from a decoded JSON array."""
        if not isinstance(data, list):
            raise DecodeError(
                f"expected JSON array of {cls.__name__}, got {type(data).__name__}"
            )
        return [cls.from_dict(item) for item in data]


@dataclass
class UpsertResponse(JSONModel):
    """
    Result of a bulk upsert.

    The error and key arrays are passed through as raw JSON because their
    shape is not documented upstream.
    """
    created: int = json_field("created", default=0)
    created_errors: list[Any] = json_field("createdErrors", default_factory=list)
    inserts_keys: list[Any] = json_field("insertsKeys", default_factory=list)
    updated: int = json_field("updated", default=0)
    updated_errors: list[Any] = json_field("updatedErrors", default_factory=list)
    updates_keys: list[Any] = json_field("updatesKeys", default_factory=list)
    non_updates: int = json_field("nonupdates", default=0)
    modified: list[str] = json_field("modified", default_factory=list)
    upserted_ids: list[str] = json_field("upsertedIds", default_factory=list)
    permission_errors: list[Any] = json_field("permissionErrors", default_factory=list)


@dataclass
class DeleteResponse(JSONModel):
    """Result of a delete: affected count and a numeric success flag."""
    n: int = json_field("n", default=0)
    ok: int = json_field("ok", default=0)
    deleted_count: int = json_field("deletedCount", default=0)

    @property
    def succeeded(self) -> bool:
        return self.ok == 1
