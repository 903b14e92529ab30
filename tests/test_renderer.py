"""Unit tests for composing record and listing pages."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from conftest import write_templates

from bps_pages._constants import INDEX_TITLE
from bps_pages.records import Record
from bps_pages.renderer import PageRenderer
from bps_pages.template_engine import compile_templates

if typ.TYPE_CHECKING:
    from pathlib import Path


def _record(tmp_path: Path, **fields: typ.Any) -> Record:
    return Record.from_mapping(fields, source=tmp_path / f"{fields['slug']}.jsonld")


@pytest.fixture
def renderer(tmp_path: Path) -> PageRenderer:
    return PageRenderer(compile_templates(write_templates(tmp_path / "templates")))


def test_record_page_embeds_item_output_in_shell(
    tmp_path: Path, renderer: PageRenderer
) -> None:
    record = _record(tmp_path, slug="x", headline="H")
    item_html = renderer.templates.item(record.context())

    html = renderer.render_record(record, [record])

    assert item_html in html, "item output should be embedded verbatim in the shell"
    assert html.startswith("<html>")


def test_record_page_title_overrides_shell_default(
    tmp_path: Path, renderer: PageRenderer
) -> None:
    record = _record(
        tmp_path,
        slug="pork",
        headline="Pork",
        pageTitle="Pork, in verse",
        featuredImage="pork.jpg",
    )
    soup = BeautifulSoup(renderer.render_record(record, [record]), "html.parser")
    assert soup.title is not None
    assert soup.title.string == "Pork, in verse"
    featured = soup.select_one("img.featured")
    assert featured is not None
    assert featured.get("src") == "pork.jpg"


def test_record_without_image_uses_shell_default(
    tmp_path: Path, renderer: PageRenderer
) -> None:
    record = _record(tmp_path, slug="rye", headline="Rye")
    soup = BeautifulSoup(renderer.render_record(record, [record]), "html.parser")
    featured = soup.select_one("img.featured")
    assert featured is not None
    assert featured.get("src") == "bread1.gif"


def test_body_and_recipes_cannot_be_shadowed_by_record_fields(
    tmp_path: Path, renderer: PageRenderer
) -> None:
    """``body`` and ``recipes`` always come from the renderer."""
    record = _record(
        tmp_path, slug="sly", headline="Sly", body="HIJACKED", recipes=["nope"]
    )
    other = _record(tmp_path, slug="other", headline="Other")
    soup = BeautifulSoup(renderer.render_record(record, [other, record]), "html.parser")

    main = soup.select_one("main")
    assert main is not None
    assert "HIJACKED" not in main.decode_contents()
    assert main.select_one("article h1") is not None
    links = [a.get("href") for a in soup.select("nav a")]
    assert links == ["other.html", "sly.html"]


def test_listing_page_uses_fixed_title_and_navigation(
    tmp_path: Path, renderer: PageRenderer
) -> None:
    records = [
        _record(tmp_path, slug="a", headline="A", pageTitle="Not the index"),
        _record(tmp_path, slug="b", headline="B"),
    ]
    soup = BeautifulSoup(renderer.render_listing(records), "html.parser")
    assert soup.title is not None
    assert soup.title.string == INDEX_TITLE
    assert soup.select_one("main section.welcome") is not None
    assert [a.get_text() for a in soup.select("nav a")] == ["A", "B"]


def test_custom_index_title(tmp_path: Path) -> None:
    renderer = PageRenderer(
        compile_templates(write_templates(tmp_path / "t")), index_title="Crumbs"
    )
    soup = BeautifulSoup(renderer.render_listing([]), "html.parser")
    assert soup.title is not None
    assert soup.title.string == "Crumbs"
