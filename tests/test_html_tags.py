from markupsafe import Markup

from navtree.html_tags import begin_tag, end_tag, merge_class, render_attrs, tag


def test_render_attrs_uses_preferred_order():
    attrs = {"data-x": "1", "href": "/a", "class": "link", "id": "main"}

    assert render_attrs(attrs) == ' id="main" class="link" href="/a" data-x="1"'


def test_render_attrs_skips_none_and_false():
    assert render_attrs({"title": None, "hidden": False, "disabled": True}) == " disabled"
    assert render_attrs({}) == ""
    assert render_attrs({"title": None}) == ""


def test_render_attrs_expands_data_and_aria():
    attrs = {"data": {"depth": 2, "ids": [1, 2]}, "aria": {"current": "page"}}

    assert render_attrs(attrs) == ' data-depth="2" data-ids="[1, 2]" aria-current="page"'


def test_render_attrs_escapes_values():
    assert render_attrs({"title": 'Say "hi" & <bye>'}) == (
        ' title="Say &quot;hi&quot; &amp; &lt;bye&gt;"'
    )


def test_class_lists_are_joined():
    assert render_attrs({"class": ["a", "", "b"]}) == ' class="a b"'


def test_tag_escapes_content_unless_markup():
    assert tag("a", "<x>", {"href": "/"}) == '<a href="/">&lt;x&gt;</a>'
    assert tag("div", Markup("<ul></ul>")) == "<div><ul></ul></div>"
    assert begin_tag("li") + end_tag("li") == "<li></li>"


def test_merge_class_keeps_leading_space_for_missing_class():
    attrs: dict = {}
    merge_class(attrs, "list-depth-1")
    assert attrs["class"] == " list-depth-1"

    attrs = {"class": "item"}
    merge_class(attrs, "active")
    assert attrs["class"] == "item active"

    attrs = {"class": ["item"]}
    merge_class(attrs, "active")
    assert attrs["class"] == ["item", "active"]
