import pytest

from menudeck.loader import load_sections, parse_sections
from menudeck.model import MenuItem, SectionType

SAMPLE = """
[MainMenu]
type = menu
items = [
    {text="Start Game", action="start_game"}
    {text="Options", action="", submenu="GraphicsOptions"}
    {text="Exit", action="exit", submenu="ExitDialog"}
]

[ExitDialog]
type = dialog
message = "Really quit?"
buttons = [
    {text="Yes", action="quit"}
    {text="No", action="close_dialog"}
]
"""


def test_menu_section_is_parsed():
    sections = parse_sections(SAMPLE.splitlines())
    main = sections["MainMenu"]
    assert main.kind is SectionType.MENU
    assert main.items == [
        MenuItem("StartGame", "start_game", ""),
        MenuItem("Options", "", "GraphicsOptions"),
        MenuItem("Exit", "exit", "ExitDialog"),
    ]


def test_dialog_section_is_parsed():
    sections = parse_sections(SAMPLE.splitlines())
    dialog = sections["ExitDialog"]
    assert dialog.kind is SectionType.DIALOG
    assert dialog.message == "Reallyquit?"
    assert dialog.items == [MenuItem("Yes", "quit"), MenuItem("No", "close_dialog")]


def test_dialog_items_ignore_submenu():
    text = '[D]\ntype=dialog\n{text="A", action="go", submenu="X"}\n]\n'
    assert parse_sections(text.splitlines())["D"].items == [MenuItem("A", "go", "")]


def test_section_names_are_the_only_keys():
    assert set(parse_sections(SAMPLE.splitlines())) == {"MainMenu", "ExitDialog"}


def test_unknown_type_is_ignored():
    text = "[Thing]\ntype=widget\n"
    assert parse_sections(text.splitlines()) == {}


def test_header_without_closing_bracket_uses_rest_of_line():
    text = "[Main\ntype=menu\n]\n"
    assert list(parse_sections(text.splitlines())) == ["Main"]


def test_unterminated_block_swallows_following_sections():
    text = '[A]\ntype=menu\n{text="x", action="y"}\n[B]\ntype=menu\n'
    sections = parse_sections(text.splitlines())
    assert list(sections) == ["A"]
    assert sections["A"].items == [MenuItem("x", "y")]


def test_later_section_replaces_earlier():
    text = '[A]\ntype=menu\n{text="one", action="a"}\n]\n[A]\ntype=menu\n{text="two", action="b"}\n]\n'
    assert parse_sections(text.splitlines())["A"].items == [MenuItem("two", "b")]


def test_load_sections_reads_file(tmp_path):
    path = tmp_path / "menu.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_sections(path) == parse_sections(SAMPLE.splitlines())


def test_load_sections_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sections(tmp_path / "absent.txt")