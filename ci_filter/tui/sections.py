from typing import Optional

from rich.panel import Panel

from ci_filter.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def empty(title: str, message: str) -> Panel:
        return Panel(f"[{UIStyle.DIM.value}]{message}[/{UIStyle.DIM.value}]", title=title, border_style=UIStyle.DIM.value, padding=(0, 1))
