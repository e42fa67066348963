from coursekit.util import get_indent, split_name


def test_split_name():
    assert split_name("Emma Farrell Jr.") == ("Emma Farrell", "Jr.")
    assert split_name("{Wang} Wei  Ling") == ("Wei Ling", "Wang")
    assert split_name("Madonna") == ("", "Madonna")
    assert split_name("  ") == ("", "")
    assert split_name(None) == ("", "")


def test_get_indent():
    assert get_indent(3) == "   "
