"""Shared fixtures for building throwaway recipe sites under ``tmp_path``."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest

from bps_pages.config import SiteConfig

SHELL_SOURCE = (
    "<html><head><title>{{ pageTitle }}</title></head><body>"
    '<img class="featured" src="{{ featuredImage or \'bread1.gif\' }}">'
    '<nav>{% for recipe in recipes %}<a href="{{ recipe.slug }}.html">'
    "{{ recipe.headline }}</a>{% endfor %}</nav>"
    "<main>{{ body }}</main></body></html>\n"
)
ITEM_SOURCE = (
    '<article><h1>{{ headline }}</h1><p class="missing">{{ notThere }}'
    "{{ nutrition.calories }}</p></article>"
)
LISTING_SOURCE = '<section class="welcome">Welcome, bakers</section>'


def write_record(directory: Path, filename: str, **fields: typ.Any) -> Path:
    """Write ``fields`` as a JSON record file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(json.dumps(fields), encoding="utf-8")
    return path


def write_templates(
    directory: Path,
    *,
    shell: str = SHELL_SOURCE,
    item: str = ITEM_SOURCE,
    listing: str = LISTING_SOURCE,
) -> Path:
    """Write the three test templates into ``directory`` and return it."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "layout.jinja").write_text(shell, encoding="utf-8")
    (directory / "recipe.jinja").write_text(item, encoding="utf-8")
    (directory / "index.jinja").write_text(listing, encoding="utf-8")
    return directory


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Return a site root holding three recipes, templates, and a few assets."""
    root = tmp_path / "site"
    recipes = root / "data" / "recipes"
    write_record(
        recipes,
        "pancakes.jsonld",
        slug="pancakes",
        headline="Pancakes",
        recipeIngredient=["flour", "milk", "eggs"],
    )
    write_record(
        recipes,
        "crispy-pork.jsonld",
        slug="crispy-pork",
        headline="Crispy pork",
        pageTitle="Crispy pork, in verse",
        featuredImage="img_4638_small.jpg",
    )
    write_record(
        recipes,
        "lemony-chickpea.jsonld",
        slug="lemony-chickpea",
        headline="Lemony chickpea stew",
    )
    (recipes / "notes.txt").write_text("not a record", encoding="utf-8")
    write_templates(root / "templates")
    (root / "bps.css").write_text("body { color: brown; }\n", encoding="utf-8")
    (root / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")
    images = root / "images"
    images.mkdir()
    (images / "loaf.gif").write_bytes(b"GIF89a\x01\x00\x01\x00")
    (images / "crumb.jpg").write_bytes(b"\xff\xd8\xff\xe0")
    return root


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    """Return a SiteConfig for ``site_root`` using its local templates."""
    config = SiteConfig.from_root(site_root)
    config.templates_dir = site_root / "templates"
    config.assets = ("bps.css", "robots.txt", "CNAME")
    return config
