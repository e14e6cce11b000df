"""Window setup and the main event loop of the menu demo."""

import argparse
import sys
from collections.abc import Callable

import pygame

from .menu import MenuSystem

TITLE = "SDL Menu System"


class RenderSystem:
    """Owns the display window and its drawing surface."""

    def __init__(self, width: int, height: int):
        pygame.display.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)

    def __enter__(self) -> "RenderSystem":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def clear(self) -> None:
        self.surface.fill((0, 0, 0))

    def present(self) -> None:
        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()


def make_action_handler(menu, output) -> Callable[[str], None]:
    """Build the handler that reports actions and opens the matching screens."""

    def handle(action: str) -> None:
        print(f"Action: {action}", file=output, flush=True)
        if action in ("exit", "open_exit_dialog"):
            menu.show_dialog("ExitDialog")
        elif action == "open_graphics_options":
            menu.push_menu("GraphicsOptions")

    return handle


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the menu demo.")
    parser.add_argument("--menu", default="menu.txt", help="menu resource file")
    parser.add_argument("--font", default="arialmt.ttf", help="TrueType font file")
    args = parser.parse_args(argv)

    handler: Callable[[str], None] | None = None

    def dispatch(action: str) -> None:
        # The handler needs the menu, so it is bound once the menu exists.
        if handler is not None:
            handler(action)

    with RenderSystem(800, 600) as renderer:
        try:
            menu = MenuSystem(renderer.surface, args.font, dispatch)
        except OSError as exc:
            print(f"Failed to open font: {exc}", file=sys.stderr)
            return 1
        handler = make_action_handler(menu, sys.stdout)
        with menu:
            try:
                menu.load_resources(args.menu)
            except OSError:
                print(f"Failed to open menu file: {args.menu}", file=sys.stderr)
                return 1
            try:
                menu.push_menu("MainMenu")
            except KeyError as exc:
                print(exc.args[0], file=sys.stderr)

            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    try:
                        menu.handle_event(event)
                    except KeyError as exc:
                        print(exc.args[0], file=sys.stderr)
                renderer.clear()
                menu.render()
                renderer.present()
                pygame.time.delay(16)
    return 0