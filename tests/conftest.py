from pathlib import Path

import pytest
import yaml

from navtree.menu import MenuStore

MENU_ITEMS = [
    {"navId": 1, "title": "Home", "alias": "home", "isHome": True, "sortIndex": 0},
    {
        "navId": 2,
        "title": "About",
        "alias": "about",
        "sortIndex": 1,
        "properties": {"icon": "info"},
    },
    {"navId": 3, "title": "Team", "alias": "team", "parentNavId": 2, "sortIndex": 0},
    {"navId": 4, "title": "Jobs", "alias": "jobs", "parentNavId": 2, "sortIndex": 1},
    {"navId": 5, "title": "Secret", "alias": "secret", "sortIndex": 2, "isHidden": True},
    {"navId": 6, "title": "Imprint", "alias": "imprint", "container": "footer"},
]


@pytest.fixture()
def menu_path(tmp_path: Path) -> Path:
    path = tmp_path / "menu.yaml"
    path.write_text(yaml.safe_dump({"items": MENU_ITEMS}), encoding="utf-8")
    return path


@pytest.fixture()
def store(menu_path: Path) -> MenuStore:
    return MenuStore.load(menu_path)
