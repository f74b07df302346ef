"""Open integer enums for forward-compatible map fields.

Map files written by newer editors may use enum values this library does not
know about yet. Rather than rejecting the document, every enum field is an
*open* enum: the known members, plus an unknown member created on demand that
carries the raw wire integer and writes it back unchanged.

Example:
    >>> class Shape(LooseIntEnum):
    ...     SQUARE = 0
    ...     CIRCLE = 1
    >>> Shape(1)
    <Shape.CIRCLE: 1>
    >>> odd = Shape(7)
    >>> odd.is_known, int(odd)
    (False, 7)
    >>> Shape(7) is odd
    True
"""

from __future__ import annotations

from enum import IntEnum
import logging
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

logger = logging.getLogger(__name__)


class LooseIntEnum(IntEnum):
    """IntEnum whose unrecognised values become cached unknown members."""

    @classmethod
    def _missing_(cls, value: object) -> LooseIntEnum | None:
        if not isinstance(value, int) or isinstance(value, bool):
            return None

        cached = cls._value2member_map_.get(value)
        if cached is not None:
            return cached  # type: ignore[return-value]

        member = int.__new__(cls, value)
        member._name_ = f"UNKNOWN_{value}"
        member._value_ = value
        logger.debug(
            "Unrecognised %s value %d; keeping it as an unknown member", cls.__name__, value
        )
        return cls._value2member_map_.setdefault(value, member)  # type: ignore[return-value]

    @property
    def is_known(self) -> bool:
        """True if this is a declared member rather than an unknown wire value."""
        return self._name_ in type(self).__members__

    @classmethod
    def coerce(cls, value: Any) -> LooseIntEnum:
        """Validate a wire value into a member of this enum.

        Raises:
            ValueError: If the value is not an integer.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls(int(value))
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, float) and value.is_integer():
            return cls(int(value))
        raise ValueError(f"{cls.__name__} expects an integer, got {value!r}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                int, when_used="json"
            ),
        )


class LooseBool(LooseIntEnum):
    """Integer boolean used by the map format (0/1, anything else unknown)."""

    FALSE = 0
    TRUE = 1

    def as_bool(self) -> bool:
        """Return as a bool, with unknown values counting as False."""
        return self is LooseBool.TRUE
