"""Errors and exceptions raised by the library
"""

from __future__ import annotations


class InvalidCharacter(ValueError):
    """Raised when a value contains a character reserved by the passwd format.

    The characters ``,``, ``:``, ``=``, ``\\``, ``"`` and the newline are
    not allowed inside a GECOS field, since they would break either the
    comma separated GECOS field or the colon separated passwd line. The
    same set is rejected by ``chfn``.
    """

    def __init__(self, char: str, msg: None | str = None) -> None:
        """
        Args:
            char: The first offending character found in the value.
            msg: The exception message.
        """
        self.char = char
        """The offending character"""

        if msg is None:
            msg = (
                f"Invalid character {char!r} in GECOS field "
                "(',', ':', '=', '\\', '\"' and '\\n' are not allowed)"
            )
        super().__init__(msg)
