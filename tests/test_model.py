from menudeck.model import MenuItem, MenuSection, SectionType


def test_item_target_defaults_to_empty():
    item = MenuItem("Play", "start")
    assert item.target == ""
    assert item.text == "Play"
    assert item.action == "start"


def test_section_defaults():
    section = MenuSection(SectionType.MENU, "Main")
    assert section.items == []
    assert section.message == ""
    assert section.name == "Main"


def test_sections_do_not_share_item_lists():
    first = MenuSection(SectionType.MENU, "A")
    second = MenuSection(SectionType.MENU, "B")
    first.items.append(MenuItem("x", "y"))
    assert second.items == []
    assert len(first.items) == 1


def test_section_type_from_keyword():
    assert SectionType("menu") is SectionType.MENU
    assert SectionType("dialog") is SectionType.DIALOG


def test_items_compare_by_value():
    assert MenuItem("a", "b", "c") == MenuItem("a", "b", "c")
    assert MenuItem("a", "b") != MenuItem("a", "b", "c")