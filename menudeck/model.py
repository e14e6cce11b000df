"""Data model for menus and dialogs described in a menu resource file."""

from dataclasses import dataclass, field
from enum import Enum


class SectionType(Enum):
    """Kind of a section; the value is the keyword used in resource files."""

    MENU = "menu"
    DIALOG = "dialog"


@dataclass
class MenuItem:
    """A clickable entry of a menu or a button of a dialog."""

    text: str
    action: str
    target: str = ""


@dataclass
class MenuSection:
    """A named menu or dialog with its items and, for dialogs, a message."""

    kind: SectionType
    name: str
    items: list[MenuItem] = field(default_factory=list)
    message: str = ""