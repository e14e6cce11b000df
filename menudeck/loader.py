"""Parser for the bracketed menu resource format."""

from collections.abc import Iterable, Iterator
from os import PathLike

from .model import MenuItem, MenuSection, SectionType

_WHITESPACE = " \t\n\v\f\r"


def _strip_whitespace(line: str) -> str:
    return "".join(ch for ch in line if ch not in _WHITESPACE)


def _find(text: str, sub: str, pos: int | None) -> int | None:
    if pos is None or pos > len(text):
        return None
    index = text.find(sub, pos)
    return None if index < 0 else index


def _slice(text: str, start: int, end: int | None) -> str:
    return text[start:] if end is None else text[start:end]


def _first_quoted(line: str) -> tuple[str, int | None]:
    quote = _find(line, '"', 0)
    start = 0 if quote is None else quote + 1
    end = _find(line, '"', start)
    return _slice(line, start, end), end


def _quoted_after(line: str, marker: str, pos: int | None) -> tuple[str, int | None] | None:
    found = _find(line, marker, pos)
    if found is None:
        return None
    start = found + len(marker)
    end = _find(line, '"', start)
    return _slice(line, start, end), end


def _parse_item(line: str, with_target: bool) -> MenuItem:
    text, end = _first_quoted(line)
    action = ""
    found = _quoted_after(line, 'action="', end)
    if found is not None:
        action, end = found
    target = ""
    if with_target:
        found = _quoted_after(line, 'submenu="', end)
        if found is not None:
            target = found[0]
    return MenuItem(text, action, target)


def _parse_block(lines: Iterator[str], name: str, kind: SectionType) -> MenuSection:
    section = MenuSection(kind, name)
    for raw in lines:
        line = _strip_whitespace(raw)
        if line == "]":
            break
        if kind is SectionType.DIALOG and "message=" in line:
            section.message = _first_quoted(line)[0]
        elif "{text=" in line:
            section.items.append(_parse_item(line, with_target=kind is SectionType.MENU))
    return section


def parse_sections(lines: Iterable[str]) -> dict[str, MenuSection]:
    """Parse resource lines into sections keyed by name.

    All whitespace is dropped from every line, so item texts lose their spaces.
    A later section with the same name replaces an earlier one.
    """
    sections: dict[str, MenuSection] = {}
    current = ""
    remaining = iter(lines)
    for raw in remaining:
        line = _strip_whitespace(raw)
        if not line:
            continue
        if line.startswith("["):
            close = line.find("]")
            current = line[1:close] if close != -1 else line[1:]
            continue
        key, _, value = line.partition("=")
        if key != "type":
            continue
        if value == SectionType.MENU.value:
            sections[current] = _parse_block(remaining, current, SectionType.MENU)
        elif value == SectionType.DIALOG.value:
            sections[current] = _parse_block(remaining, current, SectionType.DIALOG)
    return sections


def load_sections(path: str | PathLike) -> dict[str, MenuSection]:
    """Read and parse a resource file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_sections(handle)