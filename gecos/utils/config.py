"""Library configuration.

Settings are only set programmatically; the library reads no
environment variables nor configuration files.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from gecos.utils import ui


class Settings(BaseModel):
    """Library wide settings"""

    verbosity: int = Field(default=ui.WARNING, ge=ui.DEBUG, le=ui.FATAL)
    """Minimum level of the messages shown by the UI"""


class Configuration:
    """Holds the settings currently in use"""

    def __init__(self, settings: None | Settings = None) -> None:
        self.settings: Settings
        self.reset(settings)

    def reset(self, settings: None | Settings = None) -> None:
        """Restore the default settings, or apply *settings* if given."""
        self.settings = settings if settings is not None else Settings()


conf: Configuration
