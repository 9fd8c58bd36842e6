"""The GECOS record and its string representation.

The GECOS (or *comment*) field is the fifth column of a passwd entry. By
convention it is a comma separated list::

    full_name,room,work_phone,home_phone[,other[,other...]]

See passwd(5) for an introduction of the format. Some implementations
allow more than one *other* field, so `Gecos.other` is a list; it is the
caller responsibility to keep it compatible with the consumer.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import TypedDict

from gecos.field import SanitizedString

SEPARATOR = ","

FIXED_FIELDS = ("full_name", "room", "work_phone", "home_phone")
"""Positional fields, in the order they appear in the string"""


def _sanitize(value: None | str | SanitizedString) -> Optional[SanitizedString]:
    if value is None or isinstance(value, SanitizedString):
        return value
    return SanitizedString(value)


@dataclasses.dataclass
class Gecos:
    """Structured GECOS field.

    Every field except `other` can be ``None``, meaning the field is not
    set. Values must be `SanitizedString`; to build a record from plain
    strings use `Gecos.new`.

    Examples:

        Create a record and convert it into its passwd representation:

            >>> gecos = Gecos(full_name=SanitizedString("Test Name"))
            >>> gecos.to_gecos_string()
            'Test Name,,,,'

        Parse an existing one:

            >>> gecos = Gecos.from_gecos_string("Some Person,,,Home phone,Other")
            >>> str(gecos.home_phone)
            'Home phone'

    An empty fixed field and a field not set are written the same way,
    and both are read back as not set. Likewise, `other` holding a single
    empty string is written as an empty `other`, and read back as one.
    """

    full_name: Optional[SanitizedString] = None
    """Like *Guest*"""

    room: Optional[SanitizedString] = None
    """Like *H-1.13*"""

    work_phone: Optional[SanitizedString] = None
    """Like *574*"""

    home_phone: Optional[SanitizedString] = None
    """Like *+491606799999*"""

    other: List[SanitizedString] = dataclasses.field(default_factory=list)
    """Extra information, such as an email address. Empty if there is no data."""

    class Serialized(TypedDict):
        full_name: Optional[str]
        room: Optional[str]
        work_phone: Optional[str]
        home_phone: Optional[str]
        other: List[str]

    @classmethod
    def new(
        cls,
        full_name: None | str | SanitizedString = None,
        room: None | str | SanitizedString = None,
        work_phone: None | str | SanitizedString = None,
        home_phone: None | str | SanitizedString = None,
        other: Iterable[str | SanitizedString] = (),
    ) -> Gecos:
        """Build a record from plain strings.

        Every string is validated as a `SanitizedString`; ``None`` leaves
        the field unset.

        Raises:
            InvalidCharacter: If any of the values contains a forbidden
                character.
            TypeError: If `other` is a single string instead of a sequence.
        """
        if isinstance(other, (str, SanitizedString)):
            raise TypeError("`other` must be a sequence of strings, not a string")
        return cls(
            full_name=_sanitize(full_name),
            room=_sanitize(room),
            work_phone=_sanitize(work_phone),
            home_phone=_sanitize(home_phone),
            other=[
                o if isinstance(o, SanitizedString) else SanitizedString(o)
                for o in other
            ],
        )

    def to_gecos_string(self) -> str:
        """Convert the record into a GECOS string, as found in the passwd database.

        Fields not set are written as empty strings, so the result always
        contains the four fixed fields.
        """
        fixed = [getattr(self, name) for name in FIXED_FIELDS]
        segments = ["" if value is None else str(value) for value in fixed]
        segments.append(SEPARATOR.join(str(o) for o in self.other))
        return SEPARATOR.join(segments)

    @classmethod
    def from_gecos_string(cls, text: str) -> Gecos:
        """Parse a GECOS string, as found in the passwd database.

        Missing trailing fields are not set; empty fixed fields are not set
        either. Everything after the fourth comma goes into `other`; empty
        values are kept, except for a single empty value after the fourth
        comma, which means `other` is empty.

        Args:
            text: The GECOS field, without the surrounding passwd columns.

        Raises:
            InvalidCharacter: If any of the fields contains a forbidden
                character. Nothing is returned in that case.
        """
        if not isinstance(text, str):
            raise TypeError(f"String required, got {type(text).__name__}")

        segments = iter(text.split(SEPARATOR))
        fixed: dict[str, Optional[SanitizedString]] = {}
        for name in FIXED_FIELDS:
            segment = next(segments, None)
            if segment is None:
                fixed[name] = None
                continue
            value = SanitizedString(segment)
            # Empty means not set
            fixed[name] = value if value.value else None

        tail = list(segments)
        if tail == [""]:
            # A lone empty tail is what an empty `other` is written as
            tail = []
        other = [SanitizedString(segment) for segment in tail]
        return cls(**fixed, other=other)

    def dict(self) -> Serialized:
        """Serialize the record into a JSON friendly dictionary."""
        return {
            "full_name": None if self.full_name is None else str(self.full_name),
            "room": None if self.room is None else str(self.room),
            "work_phone": None if self.work_phone is None else str(self.work_phone),
            "home_phone": None if self.home_phone is None else str(self.home_phone),
            "other": [str(o) for o in self.other],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Gecos:
        """Inverse of `dict`; missing keys leave the field unset."""
        other = data.get("other")
        return cls.new(
            full_name=data.get("full_name"),
            room=data.get("room"),
            work_phone=data.get("work_phone"),
            home_phone=data.get("home_phone"),
            other=[] if other is None else other,
        )

    def __str__(self) -> str:
        return self.to_gecos_string()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_gecos_string
            ),
        )

    @classmethod
    def validate(cls, v) -> Gecos:
        """Accept a record, its string representation or its dictionary."""
        if isinstance(v, cls):
            return v
        if isinstance(v, str):
            return cls.from_gecos_string(v)
        if isinstance(v, Mapping):
            try:
                return cls.from_dict(v)
            except TypeError as exc:
                raise ValueError(str(exc)) from exc
        raise ValueError("Gecos, string or mapping required")
