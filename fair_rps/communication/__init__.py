"""Session output - view payloads and terminal rendering."""

from .console import ConsoleDisplay, ConsoleReader
from .views import Display, HelpView, MenuView, ResultView

__all__ = ["ConsoleDisplay", "ConsoleReader", "Display", "HelpView", "MenuView", "ResultView"]
