"""TUI widgets for the picker screen."""

from papirus_switcher.cli.widgets.base import Widget, Rect
from papirus_switcher.cli.widgets.color_list import ColorListWidget
from papirus_switcher.cli.widgets.confirm_dialog import ConfirmDialogWidget
from papirus_switcher.cli.widgets.header import HeaderWidget
from papirus_switcher.cli.widgets.message_box import MessageBoxWidget
from papirus_switcher.cli.widgets.search_bar import SearchBarWidget
from papirus_switcher.cli.widgets.status_bar import StatusBarWidget, Shortcut

__all__ = [
    "Widget",
    "Rect",
    "ColorListWidget",
    "ConfirmDialogWidget",
    "HeaderWidget",
    "MessageBoxWidget",
    "SearchBarWidget",
    "StatusBarWidget",
    "Shortcut",
]
