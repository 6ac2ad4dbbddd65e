from bs4 import BeautifulSoup

from cssinliner.cascade import (
    Element,
    MatchedDeclarationSet,
    index_elements,
    inline_elements,
    resolve,
    write_inline_style,
)
from cssinliner.rules import Declaration, InlinableRule


def matched(selector, spec, order, *declarations):
    return MatchedDeclarationSet(selector, spec, order, tuple(declarations))


def test_higher_specificity_wins_regardless_of_order():
    element = Element(tag=None, matches=[
        matched("#x", (1, 0, 0), 0, Declaration("color", "red")),
        matched("p", (0, 0, 1), 1, Declaration("color", "blue")),
    ])
    assert resolve(element)["color"].value == "red"


def test_later_rule_wins_on_equal_specificity():
    element = Element(tag=None, matches=[
        matched("p", (0, 0, 1), 0, Declaration("color", "red")),
        matched("p", (0, 0, 1), 1, Declaration("color", "blue")),
    ])
    assert resolve(element)["color"].value == "blue"


def test_important_beats_specificity_and_order():
    element = Element(tag=None, matches=[
        matched(".a", (0, 1, 0), 0, Declaration("color", "red", True)),
        matched("#id.a", (1, 1, 0), 1, Declaration("color", "blue")),
    ])
    assert resolve(element)["color"] == Declaration("color", "red", True)


def test_later_important_wins_over_earlier_important():
    element = Element(tag=None, matches=[
        matched("p", (0, 0, 1), 0, Declaration("color", "red", True)),
        matched("p", (0, 0, 1), 1, Declaration("color", "blue", True)),
    ])
    assert resolve(element)["color"].value == "blue"


def test_same_property_twice_in_one_rule():
    element = Element(tag=None, matches=[
        matched("p", (0, 0, 1), 0, Declaration("color", "red"), Declaration("color", "blue")),
    ])
    assert resolve(element)["color"].value == "blue"


def test_replaced_property_moves_to_the_end():
    element = Element(tag=None, matches=[
        matched("p", (0, 0, 1), 0, Declaration("color", "red"), Declaration("margin", "0")),
        matched(".x", (0, 1, 0), 1, Declaration("color", "blue")),
        matched("p", (0, 0, 1), 2, Declaration("margin", "1px")),
    ])
    assert list(resolve(element)) == ["color", "margin"]


def test_index_groups_matches_per_element():
    soup = BeautifulSoup('<p class="a">one</p><p>two</p>', "html.parser")
    rules = [
        InlinableRule("p", (Declaration("color", "red"),), 0),
        InlinableRule(".a", (Declaration("color", "blue"),), 1),
    ]
    elements = index_elements(soup, rules)

    assert len(elements) == 2
    first, second = elements
    assert first.tag.get_text() == "one"
    assert [m.selector for m in first.matches] == ["p", ".a"]
    assert first.matches[1].specificity == (0, 1, 0)
    assert [m.selector for m in second.matches] == ["p"]


def test_index_ignores_invalid_selectors():
    soup = BeautifulSoup("<p>one</p>", "html.parser")
    rules = [InlinableRule("p!!", (Declaration("color", "red"),), 0)]
    assert index_elements(soup, rules) == []


def test_index_leaves_no_trace_in_document():
    html = '<div><p class="a">one</p></div>'
    soup = BeautifulSoup(html, "html.parser")
    index_elements(soup, [InlinableRule("div p", (Declaration("color", "red"),), 0)])
    assert str(soup) == html


def test_write_keeps_existing_inline_declarations():
    soup = BeautifulSoup('<p style="color: blue">x</p>', "html.parser")
    element = Element(tag=soup.p)
    resolved = {
        "color": Declaration("color", "red", True),
        "margin": Declaration("margin", "0"),
    }
    write_inline_style(element, resolved)
    assert soup.p["style"] == "margin: 0; color: blue;"


def test_inline_elements_writes_style_attribute():
    soup = BeautifulSoup('<p id="x">x</p>', "html.parser")
    element = Element(tag=soup.p, matches=[
        matched("p", (0, 0, 1), 0, Declaration("color", "red"), Declaration("font-size", "12px", True)),
    ])
    inline_elements([element])
    assert soup.p["style"] == "color: red; font-size: 12px !important;"
