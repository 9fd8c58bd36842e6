"""Log style user interface"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from gecos.utils import ui


class LogUI(ui.UI):
    """Print timestamped messages at or above *level*.

    Python warnings are left alone; the process owner decides where
    those go.
    """

    def __init__(self, level: int) -> None:
        self.level: int = level

    def get_leading(self, level: None | ui.LEVEL_LITERAL) -> str:
        ret = f"[{datetime.now().isoformat()}]"
        if level is not None:
            ret += f" [{ui.LEVEL_STRING[level]:^7}]"
        return ret

    def print(self, *values: str | Any, level: None | ui.LEVEL_LITERAL = None) -> None:
        print(self.get_leading(level), *values)

    def message(self, level: ui.LEVEL_LITERAL, *values: str | Any) -> None:
        if level >= self.level:
            self.print(*values, level=level)
