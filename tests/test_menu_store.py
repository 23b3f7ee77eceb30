import json
from pathlib import Path

import pytest

from navtree.menu import MenuStore, QueryIterator, validate_menu
from navtree.models import MenuItemRecord, RenderConfig
from navtree.renderer import NavTree


def _aliases(nodes) -> list[str]:
    return [node.alias for node in nodes]


def test_find_top_level_skips_hidden_and_other_containers(store: MenuStore):
    assert _aliases(store.find_top_level("default", 0)) == ["home", "about"]
    assert _aliases(store.find_top_level("footer", 0)) == ["imprint"]


def test_query_is_lazy_and_reiterable(store: MenuStore):
    result = store.find().where(parent_nav_id=2).all()

    assert isinstance(result, QueryIterator)
    assert _aliases(result) == ["team", "jobs"]
    assert _aliases(result) == ["team", "jobs"]
    assert result.count() == 2


def test_with_hidden_includes_hidden_pages(store: MenuStore):
    query = store.find().where(container="default", parent_nav_id=0).with_hidden()

    assert _aliases(query.all()) == ["home", "about", "secret"]
    assert query.count() == 3


def test_where_rejects_unknown_fields(store: MenuStore):
    with pytest.raises(ValueError):
        store.find().where(colour="red")


def test_links_and_depth(store: MenuStore):
    assert store.home is not None
    assert store.home.link == "/"
    team = store.find_by_alias("team")
    assert team is not None
    assert team.link == "/about/team"
    assert team.depth == 2
    assert team.parent == store.find_by_alias("about")
    assert store.get(2).depth == 1


def test_explicit_link_wins():
    store = MenuStore([MenuItemRecord(nav_id=1, title="Docs", alias="docs", link="https://docs.example")])

    assert store.get(1).link == "https://docs.example"


def test_active_path_follows_current_page(store: MenuStore):
    current = store.with_current("team")

    assert current.current.alias == "team"
    assert {node.alias for node in current.find().with_hidden().all() if node.is_active} == {
        "about",
        "team",
    }
    assert store.current is None
    assert not store.get(2).is_active


def test_with_current_unknown_alias(store: MenuStore):
    with pytest.raises(KeyError):
        store.with_current("missing")


def test_get_property_lookup(store: MenuStore):
    about = store.find_by_alias("about")

    assert about.get_property("alias") == ("about", True)
    assert about.get_property("nav_id") == (2, True)
    assert about.get_property("depth") == (1, True)
    assert about.get_property("icon") == ("info", True)
    assert about.get_property("has_children") == (True, True)
    assert about.get_property("properties") == (None, False)
    assert about.get_property("unknown") == (None, False)


def test_has_children_ignores_hidden_children():
    store = MenuStore(
        [
            MenuItemRecord(nav_id=1, title="A", alias="a"),
            MenuItemRecord(nav_id=2, title="B", alias="b", parent_nav_id=1, is_hidden=True),
        ]
    )

    assert store.get(1).has_children is False


def test_load_json_list(tmp_path: Path):
    path = tmp_path / "menu.json"
    path.write_text(
        json.dumps([{"navId": 1, "title": "Home", "alias": "home"}]),
        encoding="utf-8",
    )

    store = MenuStore.load(path)

    assert _aliases(store.find_top_level("default", 0)) == ["home"]


def test_load_rejects_invalid_files(tmp_path: Path):
    invalid = tmp_path / "invalid.yaml"
    invalid.write_text("items:\n  - title: No id\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        MenuStore.load(invalid)

    duplicate = tmp_path / "duplicate.yaml"
    duplicate.write_text(
        "items:\n"
        "  - {navId: 1, title: A, alias: a}\n"
        "  - {navId: 1, title: B, alias: b}\n",
        encoding="utf-8",
    )
    with pytest.raises(SystemExit):
        MenuStore.load(duplicate)

    with pytest.raises(FileNotFoundError):
        MenuStore.load(tmp_path / "missing.yaml")


def test_validate_menu_reports_problems():
    store = MenuStore(
        [
            MenuItemRecord(nav_id=1, title="A", alias="a"),
            MenuItemRecord(nav_id=2, title="B", alias="a"),
            MenuItemRecord(nav_id=3, title="C", alias="c", parent_nav_id=99),
            MenuItemRecord(nav_id=4, title="D", alias="d", parent_nav_id=5),
            MenuItemRecord(nav_id=5, title="E", alias="e", parent_nav_id=4),
            MenuItemRecord(nav_id=6, title="F", alias="f", parent_nav_id=1, container="footer"),
        ]
    )

    problems = validate_menu(store)

    assert any("missing parent 99" in message for message in problems)
    assert any(message.startswith("Parent cycle: ") for message in problems)
    assert sum(message.startswith("Parent cycle") for message in problems) == 1
    assert any("Duplicate alias 'a'" in message for message in problems)
    assert any("container 'footer'" in message for message in problems)
    assert len(problems) == 4


def test_validate_menu_accepts_sample(store: MenuStore):
    assert validate_menu(store) == []


def test_render_from_store(store: MenuStore):
    config = RenderConfig(
        list_depth_class_prefix="list-depth-",
        item_active_class="active",
        item_options={"class": "item depth-{{depth}} alias-{{alias}}"},
    )

    html = NavTree(config, menu=store.with_current("team")).run()

    assert html == (
        '<ul class=" list-depth-1">'
        '<li class="item depth-1 alias-home"><a href="/">Home</a></li>'
        '<li class="item depth-1 alias-about active"><a href="/about">About</a>'
        '<ul class=" list-depth-2">'
        '<li class="item depth-2 alias-team active"><a href="/about/team">Team</a></li>'
        '<li class="item depth-2 alias-jobs"><a href="/about/jobs">Jobs</a></li>'
        "</ul></li></ul>"
    )


def test_render_from_start_item(store: MenuStore):
    config = RenderConfig.model_validate({"listDepthClassPrefix": "lvl-", "maxDepth": 1})

    html = NavTree(config, menu=store).run(store.find_by_alias("about"))

    assert html == (
        '<ul class=" lvl-0">'
        '<li><a href="/about/team">Team</a></li>'
        '<li><a href="/about/jobs">Jobs</a></li>'
        "</ul>"
    )


def test_render_other_container(store: MenuStore):
    html = NavTree(RenderConfig(), menu=store, container="footer").run()

    assert html == '<ul class=" 1"><li><a href="/imprint">Imprint</a></li></ul>'


def test_get_property_accepts_camel_case_names(store: MenuStore):
    team = store.with_current("team").find_by_alias("team")

    assert team.get_property("navId") == (3, True)
    assert team.get_property("parentNavId") == (2, True)
    assert team.get_property("sortIndex") == (0, True)
    assert team.get_property("isActive") == (True, True)
    assert team.get_property("hasChildren") == (False, True)


def test_render_camel_case_placeholders_from_config(store: MenuStore):
    config = RenderConfig.model_validate(
        {"itemOptions": {"id": "nav-{{navId}}", "data": {"parent": "{{parentNavId}}"}}}
    )

    html = NavTree(config, menu=store).run(store.find_by_alias("about"))

    assert '<li id="nav-3" data-parent="2">' in html
    assert '<li id="nav-4" data-parent="2">' in html
