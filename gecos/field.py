"""Strings safe to store inside a GECOS field
"""

from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from gecos.errors import InvalidCharacter
from gecos.utils import ui

INVALID_CHARS = (",", ":", "=", "\\", '"', "\n")
"""Characters not allowed inside a GECOS field.

Same set ``chfn`` refuses: the comma separates GECOS fields, the colon
separates passwd columns, and the rest are rejected for compatibility.
"""


class SanitizedString:
    """A string guaranteed to contain none of `INVALID_CHARS`.

    The value is checked once, on construction, and can not be modified
    afterwards; so every instance is valid for its whole life.

    Args:
        value: The text to store. Kept exactly as given: no trimming, no
            escaping.

    Raises:
        InvalidCharacter: If *value* contains a forbidden character. The
            leftmost one is reported.
        TypeError: If *value* is not a string.

    Examples:

        >>> name = SanitizedString("Another name")
        >>> str(name)
        'Another name'
        >>> SanitizedString("Doe, John")
        Traceback (most recent call last):
        ...
        gecos.errors.InvalidCharacter: Invalid character ',' in GECOS field ...
    """

    __slots__ = ("_value",)

    _value: str

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"String required, got {type(value).__name__}")
        for char in value:
            if char in INVALID_CHARS:
                ui.instance().debug(f"Rejected GECOS value: invalid character {char!r}")
                raise InvalidCharacter(char)
        object.__setattr__(self, "_value", value)

    @classmethod
    def new(cls, value: str) -> SanitizedString:
        """Return a new `SanitizedString`; same as calling the constructor."""
        return cls(value)

    @property
    def value(self) -> str:
        """The underlying text"""
        return self._value

    def __setattr__(self, name: str, _: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, (self._value,))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    def __str__(self) -> str:
        return self._value

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, SanitizedString):
            return NotImplemented
        return self._value == __o._value

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def validate(cls, v) -> SanitizedString:
        """Raise an exception if the value supplied is not the correct type"""
        if isinstance(v, cls):
            return v
        if not isinstance(v, str):
            raise ValueError("String required")
        return cls(v)
