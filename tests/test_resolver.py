from bs4 import BeautifulSoup

from uniqueselector.resolver import resolve_all_selectors, resolve_selector
from uniqueselector.soup_adapter import SoupTreeAdapter

ADAPTER = SoupTreeAdapter()


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def test_class_unique_among_siblings_wins_before_tag() -> None:
    soup = _soup('<div><p class="a">x</p><p class="b">y</p></div>')
    target = soup.find_all("p")[1]

    assert resolve_selector(target, ADAPTER) == ".b"


def test_id_is_preferred_when_listed_first() -> None:
    soup = _soup('<div><p id="main" class="a"></p><p class="a"></p></div>')

    assert resolve_selector(soup.p, ADAPTER) == "#main"


def test_tag_used_when_no_id_or_class() -> None:
    soup = _soup("<div><span></span><p></p></div>")

    assert resolve_selector(soup.p, ADAPTER) == "p"


def test_nth_child_when_siblings_are_indistinguishable() -> None:
    soup = _soup("<ul><li></li><li></li></ul>")
    target = soup.find_all("li")[1]

    assert resolve_selector(target, ADAPTER) == ":nth-child(2)"


def test_universal_fallback_when_nothing_identifies_the_element() -> None:
    soup = _soup("<section><p></p></section>")

    assert resolve_selector(soup.p, ADAPTER, ["ID", "Class"]) == "*"


def test_universal_fallback_when_nth_child_unavailable() -> None:
    soup = BeautifulSoup("", "html.parser")
    detached = soup.new_tag("p")

    assert resolve_selector(detached, ADAPTER, ["ID", "Tag", "NthChild"]) == "*"


def test_caller_order_decides_precedence() -> None:
    soup = _soup('<div><p id="main"></p><p></p></div>')

    assert resolve_selector(soup.p, ADAPTER, ["NthChild", "ID"]) == ":nth-child(1)"


def test_attributes_search_when_requested() -> None:
    soup = _soup('<form><input name="a"/><input name="b"/></form>')
    target = soup.find_all("input")[1]

    assert resolve_selector(target, ADAPTER, ["Attributes"]) == '[name="b"]'


def test_attributes_ignore_list_is_respected() -> None:
    soup = _soup('<form><input name="a"/><input name="b"/></form>')
    target = soup.find_all("input")[1]

    assert resolve_selector(target, ADAPTER, ["Attributes", "NthChild"], ["name"]) == ":nth-child(2)"


def test_tag_prefix_only_available_when_tag_is_requested() -> None:
    soup = _soup('<div><span class="x"></span><p class="x"></p></div>')

    assert resolve_selector(soup.p, ADAPTER, ["Class"]) == "*"
    assert resolve_selector(soup.p, ADAPTER, ["Class", "Tag"]) == "p.x"


def test_resolve_all_selectors_collects_each_successful_type() -> None:
    soup = _soup('<div><p class="a">x</p><p class="b" id="second">y</p></div>')
    target = soup.find_all("p")[1]

    assert resolve_all_selectors(target, ADAPTER) == ["#second", ".b", ":nth-child(2)"]


def test_resolve_all_selectors_includes_unique_tag() -> None:
    soup = _soup("<div><span></span><p></p></div>")

    assert resolve_all_selectors(soup.p, ADAPTER, ["Tag", "NthChild"]) == ["p", ":nth-child(2)"]
