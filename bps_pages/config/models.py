"""Typed dataclasses describing the recipe site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from bps_pages._constants import (
    DEFAULT_ASSETS,
    IMAGES_DIRNAME,
    INDEX_TITLE,
    ITEM_TEMPLATE,
    LISTING_TEMPLATE,
    RECORD_EXTENSION,
    SHELL_TEMPLATE,
)

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class TemplateNames:
    """Filenames of the three templates inside the templates directory."""

    shell: str = SHELL_TEMPLATE
    item: str = ITEM_TEMPLATE
    listing: str = LISTING_TEMPLATE


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site build definition.

    Attributes
    ----------
    output_dir : Path
        Directory that is cleared and regenerated on every build.
    data_dir : Path
        Directory holding one record file per recipe.
    templates_dir : Path
        Directory containing the shell, item, and listing templates.
    asset_root : Path
        Directory holding the individually named static assets.
    images_dir : Path
        Directory whose files are mirrored into ``<output>/images``.
    assets : tuple[str, ...]
        Manifest of filenames copied from ``asset_root`` when present.
    templates : TemplateNames
        Template filenames for the shell, item, and listing views.
    index_title : str
        Fixed ``pageTitle`` used for the listing page.
    record_extension : str
        File suffix that marks a record file inside ``data_dir``.
    """

    output_dir: Path
    data_dir: Path
    templates_dir: Path
    asset_root: Path
    images_dir: Path
    assets: tuple[str, ...] = DEFAULT_ASSETS
    templates: TemplateNames = dc.field(default_factory=TemplateNames)
    index_title: str = INDEX_TITLE
    record_extension: str = RECORD_EXTENSION

    @classmethod
    def from_root(cls, root: Path) -> SiteConfig:
        """Return the default layout for a site rooted at ``root``."""
        return cls(
            output_dir=root / "public",
            data_dir=root / "data" / "recipes",
            templates_dir=PACKAGE_TEMPLATES_DIR,
            asset_root=root,
            images_dir=root / IMAGES_DIRNAME,
        )


__all__ = ["PACKAGE_TEMPLATES_DIR", "SiteConfig", "SiteConfigError", "TemplateNames"]
