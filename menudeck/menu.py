"""Stack-based menu and modal dialog system drawn with pygame."""

import os
from collections.abc import Callable, Sequence

import pygame

from .loader import load_sections
from .model import MenuItem, MenuSection, SectionType

WHITE = (255, 255, 255)
_MENU_BACKGROUND = (50, 50, 100)
_MENU_ITEM_FILL = (70, 70, 120)
_DIALOG_WINDOW_FILL = (70, 70, 120)
_DIALOG_BUTTON_FILL = (100, 100, 150)


def menu_item_rect(index: int) -> pygame.Rect:
    """Screen rectangle of the menu item at ``index``."""
    return pygame.Rect(100, 100 + index * 50, 200, 40)


def dialog_button_rect(index: int) -> pygame.Rect:
    """Screen rectangle of the dialog button at ``index``."""
    return pygame.Rect(200 + index * 150, 300, 120, 40)


class MenuSystem:
    """Holds menu sections, a stack of open menus and an optional active dialog."""

    def __init__(self, surface: pygame.Surface, font_path: str | None,
                 handler: Callable[[str], None]):
        if font_path is not None and not os.path.isfile(font_path):
            raise FileNotFoundError(f"Font not found: {font_path}")
        pygame.font.init()
        self.surface = surface
        self.font_path = font_path
        self.handler = handler
        self.sections: dict[str, MenuSection] = {}
        self.menu_stack: list[str] = []
        self.active_dialog: str | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        self._font(24)

    def __enter__(self) -> "MenuSystem":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def load_resources(self, filename) -> None:
        """Add the sections of a resource file, replacing ones of the same name."""
        self.sections.update(load_sections(filename))

    def push_menu(self, name: str) -> None:
        section = self.sections.get(name)
        if section is None or section.kind is not SectionType.MENU:
            raise KeyError(f"Menu not found: {name}")
        self.menu_stack.append(name)

    def show_dialog(self, name: str) -> None:
        section = self.sections.get(name)
        if section is None or section.kind is not SectionType.DIALOG:
            raise KeyError(f"Dialog not found: {name}")
        self.active_dialog = name

    def back(self) -> None:
        """Return to the previous menu; the root menu is never popped."""
        if len(self.menu_stack) > 1:
            self.menu_stack.pop()

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.active_dialog:
            self._handle_dialog_event(event)
        elif self.menu_stack:
            self._handle_menu_event(event)

    def render(self) -> None:
        if self.active_dialog:
            self._draw_dialog(self.sections[self.active_dialog])
        elif self.menu_stack:
            self._draw_menu(self.sections[self.menu_stack[-1]])

    def close(self) -> None:
        self._fonts.clear()
        pygame.font.quit()

    @staticmethod
    def _is_left_click(event: pygame.event.Event) -> bool:
        return (event.type == pygame.MOUSEBUTTONDOWN
                and getattr(event, "button", None) == pygame.BUTTON_LEFT)

    @staticmethod
    def _hit(items: Sequence[MenuItem], rect_for: Callable[[int], pygame.Rect],
             pos) -> MenuItem | None:
        return next((item for index, item in enumerate(items)
                     if rect_for(index).collidepoint(pos)), None)

    def _handle_menu_event(self, event: pygame.event.Event) -> None:
        if not self._is_left_click(event):
            return
        current = self.sections[self.menu_stack[-1]]
        item = self._hit(current.items, menu_item_rect, event.pos)
        if item is None:
            return
        if item.target:
            target = self.sections.get(item.target)
            if target is not None and target.kind is SectionType.DIALOG:
                self.show_dialog(item.target)
            else:
                self.push_menu(item.target)
        elif item.action == "back":
            self.back()
        else:
            self.handler(item.action)

    def _handle_dialog_event(self, event: pygame.event.Event) -> None:
        if not self._is_left_click(event):
            return
        dialog = self.sections[self.active_dialog]
        item = self._hit(dialog.items, dialog_button_rect, event.pos)
        if item is None:
            return
        if item.action == "close_dialog":
            self.active_dialog = None
        else:
            self.handler(item.action)

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(self.font_path, size)
            self._fonts[size] = font
        return font

    def _draw_text(self, text: str, x: int, y: int, size: int) -> None:
        if not text:
            return
        rendered = self._font(size).render(text, True, WHITE)
        self.surface.blit(rendered, (x, y))

    def _draw_button(self, rect: pygame.Rect, fill, text: str) -> None:
        self.surface.fill(fill, rect)
        pygame.draw.rect(self.surface, WHITE, rect, 1)
        self._draw_text(text, rect.x + 10, rect.y + 10, 20)

    def _draw_menu(self, menu: MenuSection) -> None:
        self.surface.fill(_MENU_BACKGROUND)
        self._draw_text(menu.name, 100, 50, 28)
        for index, item in enumerate(menu.items):
            self._draw_button(menu_item_rect(index), _MENU_ITEM_FILL, item.text)

    def _draw_dialog(self, dialog: MenuSection) -> None:
        self.surface.fill((0, 0, 0), pygame.Rect(0, 0, 800, 600))
        self.surface.fill(_DIALOG_WINDOW_FILL, pygame.Rect(150, 150, 500, 300))
        self._draw_text(dialog.message, 200, 200, 24)
        for index, item in enumerate(dialog.items):
            self._draw_button(dialog_button_rect(index), _DIALOG_BUTTON_FILL, item.text)