# menudeck

menudeck is a small menu system for pygame. You describe menus and dialogs in a plain-text resource file.

- Menus are kept on a stack, so you can go back to the previous one.
- A dialog is shown modally in place of the current menu.
- Every left click on a button either moves between menus and dialogs or is passed to your own action handler.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
menudeck
```

The demo opens an 800×600 window titled "SDL Menu System" and then shows the menu named `MainMenu`. It takes two options:

- `--menu` names the resource file. The default is `menu.txt` in the current directory.
- `--font` names the TrueType font file. The default is `arialmt.ttf` in the current directory.

The demo prints an error and exits with status 1 in these cases:

- the font file does not exist;
- the resource file cannot be opened.

If a menu or dialog it is asked to open does not exist, it prints `Menu not found: <name>` or `Dialog not found: <name>` to stderr and keeps running.

Each action the demo receives is printed as `Action: <name>`. Three actions do more than that:

- `exit` opens `ExitDialog`.
- `open_exit_dialog` opens `ExitDialog`.
- `open_graphics_options` pushes `GraphicsOptions`.

Closing the window ends the demo.

## Resource file format

All whitespace on a line is removed before the line is read. Item texts and messages therefore lose their spaces as well: `"Really quit?"` is shown as `Reallyquit?`.

A section has three parts:

- It starts with a `[Name]` header.
- A `type=menu` or `type=dialog` line follows.
- It ends at a line that holds only `]`.

A later section with the same name replaces an earlier one.

```
[MainMenu]
type=menu
items=[
    {text="Start", action="start_game"}
    {text="Options", action="", submenu="GraphicsOptions"}
    {text="Quit", action="exit"}
]

[GraphicsOptions]
type=menu
items=[
    {text="Back", action="back"}
]

[ExitDialog]
type=dialog
message="Quit?"
buttons=[
    {text="Yes", action="quit"}
    {text="No", action="close_dialog"}
]
```

A line inside a section counts as an item if it contains `{text=`. In a dialog, a line that contains `message=` sets the message instead.

A menu item may name a `submenu`. Clicking it opens that section, in one of two ways:

- If the section is a dialog, it is shown as a dialog.
- Otherwise the name is pushed as a menu.

Some actions are handled by the menu system itself:

- `back` pops the menu stack, but it never removes the bottom menu.
- In a dialog, `close_dialog` closes the dialog.

Every other action goes to your handler.

## Using it from code

```python
import pygame
from menudeck.menu import MenuSystem

pygame.init()
screen = pygame.display.set_mode((800, 600))

def on_action(action):
    print("got", action)

with MenuSystem(screen, "arialmt.ttf", on_action) as menu:
    menu.load_resources("menu.txt")
    menu.push_menu("MainMenu")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            menu.handle_event(event)
        screen.fill((0, 0, 0))
        menu.render()
        pygame.display.flip()

pygame.quit()
```

### `MenuSystem(surface, font_path, handler)`

The constructor takes three arguments:

- `surface` is the surface the menu draws on.
- `font_path` is the font file. Pass `None` to use pygame's default font. A path that is not an existing file raises `FileNotFoundError`.
- `handler` is called with the action string of every click the system does not handle itself.

It has these methods and attributes:

- `load_resources(filename)` adds the sections of a resource file and replaces any sections with the same names. It raises `OSError` if the file cannot be opened.
- `push_menu(name)` puts a menu on the stack. It raises `KeyError` if there is no menu section of that name.
- `show_dialog(name)` makes a dialog active. It raises `KeyError` if there is no dialog section of that name.
- `back()` pops the menu stack unless only one menu is left.
- `handle_event(event)` reacts to a left mouse button press. The press goes to the active dialog if there is one, and otherwise to the top menu. All other events are ignored.
- `render()` draws the active dialog, or else the top menu.
- `close()` releases the fonts. Using the object as a context manager calls it on exit.
- `sections`, `menu_stack` and `active_dialog` hold the current state.

### Parsing without a window

`menudeck.loader.load_sections(path)` parses a resource file. `menudeck.loader.parse_sections(lines)` parses lines you already have. Both return a dict that maps each section name to a `MenuSection`.

The model types are in `menudeck.model`:

- `MenuSection` has `kind`, `name`, `items` and `message`. `kind` is a `SectionType`: `MENU` or `DIALOG`.
- `MenuItem` has `text`, `action` and `target`. `target` is the submenu name, or `""` if there is none.

### Layout

The layout helpers `menu_item_rect(index)` and `dialog_button_rect(index)` in `menudeck.menu` return the clickable `pygame.Rect` of each entry:

- Menu items are 200×40 at x=100, one every 50 pixels down from y=100.
- Dialog buttons are 120×40 at y=300, one every 150 pixels across from x=200.

A dialog is drawn in these steps:

1. The 800×600 area is filled with black.
2. A 500×300 window is drawn at (150, 150).
3. The message is drawn at (200, 200).
4. The buttons are drawn.

## What it does not do

- There is no keyboard navigation or hover highlighting. Only left mouse clicks are handled.
- The layout is fixed, with the positions given above. It is not adjusted to the surface size.