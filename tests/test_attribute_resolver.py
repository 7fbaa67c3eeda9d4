from gedcom_graph import get_attribute, get_chained_data, get_child, parse
from gedcom_graph.loader import RecordNode


def _person():
    tree = parse([
        "0 @I1@ INDI",
        "1 NAME John /Smith/",
        "1 NAME Johnny",
        "1 BIRT",
        "2 PLAC Boston",
        "2 DATE 2 FEB 1870",
        "1 DEAT Y",
    ])
    return tree.records[0]


def test_get_child_first_match_in_document_order():
    indi = _person()
    child = get_child(indi, "NAME")
    assert child is indi.children[0]
    assert child.data == "John /Smith/"


def test_get_child_miss_is_none():
    assert get_child(_person(), "SEX") is None


def test_get_attribute_single_and_multiple_matches():
    indi = _person()
    assert get_attribute(indi, "DEAT") == "Y"
    # Two NAME children: the first one wins.
    assert get_attribute(indi, "NAME") == "John /Smith/"


def test_get_attribute_present_but_empty():
    assert get_attribute(_person(), "BIRT") == ""


def test_get_attribute_miss_is_none():
    assert get_attribute(_person(), "OCCU") is None


def test_get_chained_data_nested_lookup():
    assert get_chained_data(_person(), "BIRT", "DATE") == "2 FEB 1870"
    assert get_chained_data(_person(), "BIRT", "PLAC") == "Boston"


def test_get_chained_data_empty_path_is_own_data():
    indi = _person()
    assert get_chained_data(indi) == "INDI"
    assert get_chained_data(indi.children[0]) == "John /Smith/"


def test_get_chained_data_miss_at_any_hop_is_none():
    indi = _person()
    assert get_chained_data(indi, "CHR", "DATE") is None
    assert get_chained_data(indi, "BIRT", "SOUR") is None
    assert get_chained_data(indi, "BIRT", "DATE", "TIME") is None


def test_single_hop_matches_get_attribute():
    indi = _person()
    for tag in ("NAME", "BIRT", "DEAT", "OCCU"):
        assert get_chained_data(indi, tag) == get_attribute(indi, tag)


def test_node_methods_match_functions():
    node = RecordNode(depth=0, tag="HEAD")
    sour = RecordNode(depth=1, tag="SOUR", data="PAF")
    node.add_child(sour)
    sour.add_child(RecordNode(depth=2, tag="VERS", data="5.2"))

    assert sour.parent is node
    assert node.get_child("SOUR") is sour
    assert node.get_attribute("SOUR") == "PAF"
    assert node.get_chained_data("SOUR", "VERS") == "5.2"
    assert node.find_children("SOUR") == [sour]
