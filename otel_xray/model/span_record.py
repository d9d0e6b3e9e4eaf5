"""Immutable span snapshot consumed by the translator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Mapping, Optional, Union

_NANOS_PER_SECOND = 1_000_000_000


class StatusCode(IntEnum):
    """Canonical operation status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


@dataclass(frozen=True)
class Status:
    code: StatusCode
    message: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.code == StatusCode.OK


@dataclass(frozen=True)
class Timestamp:
    """A point in time as whole epoch seconds plus nanoseconds."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < _NANOS_PER_SECOND:
            raise ValueError("nanos must be in [0, 1_000_000_000)")

    @classmethod
    def from_nanos(cls, epoch_nanos: int) -> "Timestamp":
        seconds, nanos = divmod(int(epoch_nanos), _NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=nanos)


class AttributeKind(Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AttributeValue:
    """
    Typed attribute value.

    Only STRING, BOOLEAN, INTEGER and FLOAT values have a JSON projection;
    UNKNOWN wraps anything else (sequences, bytes, objects) untouched.
    """

    kind: AttributeKind
    value: Any

    @classmethod
    def string(cls, value: str) -> "AttributeValue":
        return cls(AttributeKind.STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> "AttributeValue":
        return cls(AttributeKind.BOOLEAN, value)

    @classmethod
    def integer(cls, value: int) -> "AttributeValue":
        return cls(AttributeKind.INTEGER, value)

    @classmethod
    def floating(cls, value: float) -> "AttributeValue":
        return cls(AttributeKind.FLOAT, value)

    @classmethod
    def unknown(cls, value: Any) -> "AttributeValue":
        return cls(AttributeKind.UNKNOWN, value)

    @classmethod
    def of(cls, value: Any) -> "AttributeValue":
        """Classify a plain Python value."""
        if isinstance(value, AttributeValue):
            return value
        # bool is a subclass of int, so it has to be checked first
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, float):
            return cls.floating(value)
        if isinstance(value, str):
            return cls.string(value)
        return cls.unknown(value)


AttributeInput = Union[AttributeValue, str, bool, int, float, Any]


@dataclass(frozen=True)
class SpanRecord:
    """
    Read-only snapshot of one span.

    Attributes:
        trace_id: 16-byte trace identifier
        span_id: 8-byte span identifier
        name: Operation name, any length or charset
        start: Start timestamp
        end: End timestamp, None while the span is still open
        parent_span_id: 8-byte parent identifier, None (or all zero) for roots
        has_remote_parent: Whether the parent came from another process, if known
        status: Outcome of the operation, None when not set
        attributes: Attribute key to typed (or plain) value
    """

    trace_id: bytes
    span_id: bytes
    name: str
    start: Timestamp
    end: Optional[Timestamp] = None
    parent_span_id: Optional[bytes] = None
    has_remote_parent: Optional[bool] = None
    status: Optional[Status] = None
    attributes: Mapping[str, AttributeInput] = field(default_factory=dict)
