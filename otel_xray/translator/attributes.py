"""Attribute to annotation conversion."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Dict, Mapping, Optional

from otel_xray.model.segment import AnnotationValue
from otel_xray.model.span_record import AttributeInput, AttributeKind, AttributeValue

logger = logging.getLogger(__name__)

_SCALAR_KINDS = (
    AttributeKind.STRING,
    AttributeKind.BOOLEAN,
    AttributeKind.INTEGER,
    AttributeKind.FLOAT,
)


class UnknownAttributePolicy(Enum):
    """What to do with attribute values that have no JSON scalar form."""

    DROP = "drop"
    NULL = "null"


def convert(
    attributes: Optional[Mapping[str, AttributeInput]],
    unknown: UnknownAttributePolicy = UnknownAttributePolicy.DROP,
) -> Optional[Dict[str, AnnotationValue]]:
    """
    Convert span attributes into segment annotations.

    Args:
        attributes: Attribute key to AttributeValue (or plain Python value)
        unknown: Policy for values of unknown type

    Returns:
        New mapping of key to JSON scalar, or None when there is nothing
        to annotate
    """
    if not attributes:
        return None

    converted: Dict[str, AnnotationValue] = {}
    for key, raw in attributes.items():
        value = AttributeValue.of(raw)
        # NaN and infinities have no JSON number form
        if value.kind is AttributeKind.FLOAT and not math.isfinite(value.value):
            value = AttributeValue.unknown(value.value)
        if value.kind in _SCALAR_KINDS:
            converted[key] = value.value
        elif unknown is UnknownAttributePolicy.NULL:
            converted[key] = None
        else:
            logger.debug("dropping attribute %r with unsupported value type %s", key, type(value.value).__name__)

    return converted or None
