"""X-Ray segment document model and its wire serialization."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

AnnotationValue = Union[str, bool, int, float, None]


@dataclass(frozen=True)
class ExceptionDetail:
    id: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "message": self.message}


@dataclass(frozen=True)
class Cause:
    exceptions: Tuple[ExceptionDetail, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"exceptions": [exc.to_dict() for exc in self.exceptions]}


@dataclass(frozen=True, eq=True)
class SegmentDocument:
    """
    One X-Ray segment document.

    Optional fields hold None when absent and are omitted from the wire
    form entirely. ``in_progress``, ``error`` and ``throttle`` are either
    True or None, never False. Documents compare by value but are not
    hashable, since ``annotations`` is a mapping.
    """

    __hash__ = None

    name: str
    id: str
    trace_id: str
    start_time: float
    end_time: Optional[float] = None
    in_progress: Optional[bool] = None
    parent_id: Optional[str] = None
    namespace: Optional[str] = None
    error: Optional[bool] = None
    throttle: Optional[bool] = None
    user: Optional[str] = None
    annotations: Optional[Mapping[str, AnnotationValue]] = None
    cause: Optional[Cause] = None
    origin: Optional[str] = None
    subsegments: Optional[Tuple["SegmentDocument", ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Wire mapping, keys in document order, absent fields omitted."""
        doc: Dict[str, Any] = {
            "name": self.name,
            "id": self.id,
            "trace_id": self.trace_id,
            "start_time": self.start_time,
        }
        optional = (
            ("end_time", self.end_time),
            ("in_progress", self.in_progress),
            ("parent_id", self.parent_id),
            ("namespace", self.namespace),
            ("error", self.error),
            ("throttle", self.throttle),
            ("user", self.user),
        )
        for key, value in optional:
            if value is not None:
                doc[key] = value
        if self.annotations is not None:
            doc["annotations"] = dict(self.annotations)
        if self.cause is not None:
            doc["cause"] = self.cause.to_dict()
        if self.origin is not None:
            doc["origin"] = self.origin
        if self.subsegments is not None:
            doc["subsegments"] = [sub.to_dict() for sub in self.subsegments]
        return doc

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
