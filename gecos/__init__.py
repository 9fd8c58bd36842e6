"""Library entry point.

Parse and write the GECOS field of passwd entries. On import the
library:

- Loads the default configuration.
- Sets up the UI used to report messages.
- Exports the public types.
"""
from __future__ import annotations

import gecos.utils
import gecos.utils.config


def initlib(verbosity: None | int = None) -> None:
    """Initialize the library.

    Can be called again to re-initialize in another point; for instance
    when running tests.

    Args:
        verbosity: Minimum level of the messages to show. Defaults to
            ``WARNING``, which hides the debug messages of the library.
    """
    settings = None
    if verbosity is not None:
        settings = gecos.utils.config.Settings(verbosity=verbosity)

    if not hasattr(gecos.utils.config, "conf"):
        gecos.utils.config.conf = gecos.utils.config.Configuration(settings)
    else:
        gecos.utils.config.conf.reset(settings)
    gecos.utils.init_ui(gecos.utils.config.conf.settings.verbosity)


initlib()

# Public types -----------------------------------------------------------------
from gecos.errors import InvalidCharacter
from gecos.field import INVALID_CHARS, SanitizedString
from gecos.record import Gecos

__all__ = [
    "INVALID_CHARS",
    "Gecos",
    "InvalidCharacter",
    "SanitizedString",
    "initlib",
]
