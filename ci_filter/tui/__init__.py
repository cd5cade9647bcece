from ci_filter.tui.renderers import FilterConsoleUI

__all__ = ["FilterConsoleUI"]
