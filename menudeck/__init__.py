"""Stacked menus and modal dialogs for pygame, loaded from a text resource file."""

__version__ = "0.1.0"
__all__ = ["model", "loader", "menu", "app"]