"""Load the site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from bps_pages._constants import (
    DEFAULT_ASSETS,
    IMAGES_DIRNAME,
    INDEX_TITLE,
    RECORD_EXTENSION,
)

from .models import PACKAGE_TEMPLATES_DIR, SiteConfig, SiteConfigError, TemplateNames


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site's inputs and outputs.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with every relative path resolved against the
        ``site.root`` entry, which itself is taken relative to the current
        working directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or a value is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('public')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = _section(raw, "site")
    root = Path(site.get("root", "."))

    templates_dir_raw = site.get("templates_dir")
    templates_dir = (
        _resolve(root, templates_dir_raw)
        if templates_dir_raw
        else PACKAGE_TEMPLATES_DIR
    )

    record_extension = str(site.get("record_extension", RECORD_EXTENSION))
    if not record_extension.startswith("."):
        msg = f"record_extension must start with '.', got {record_extension!r}."
        raise SiteConfigError(msg)

    return SiteConfig(
        output_dir=_resolve(root, site.get("output_dir", "public")),
        data_dir=_resolve(root, site.get("data_dir", "data/recipes")),
        templates_dir=templates_dir,
        asset_root=_resolve(root, site.get("asset_root", ".")),
        images_dir=_resolve(root, site.get("images_dir", IMAGES_DIRNAME)),
        assets=_build_assets(raw.get("assets", DEFAULT_ASSETS)),
        templates=_build_template_names(_section(raw, "templates")),
        index_title=str(site.get("index_title", INDEX_TITLE)),
        record_extension=record_extension,
    )


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return the mapping stored under ``key`` or an empty dict."""
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        msg = f"'{key}' section must be a mapping."
        raise SiteConfigError(msg)
    return value


def _resolve(root: Path, value: str | Path) -> Path:
    """Join ``value`` onto ``root`` unless it is already absolute."""
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return root / candidate


def _build_assets(value: object) -> tuple[str, ...]:
    """Validate the asset manifest and return it as a tuple of filenames."""
    if not isinstance(value, list | tuple):
        msg = "'assets' must be a list of filenames."
        raise SiteConfigError(msg)
    names: list[str] = []
    for entry in value:
        if not isinstance(entry, str) or not entry.strip():
            msg = f"Asset entries must be non-empty strings, got {entry!r}."
            raise SiteConfigError(msg)
        names.append(entry.strip())
    return tuple(names)


def _build_template_names(payload: typ.Mapping[str, typ.Any]) -> TemplateNames:
    """Build TemplateNames from the ``templates`` section, keeping defaults."""
    base = TemplateNames()
    return TemplateNames(
        shell=payload.get("shell", base.shell),
        item=payload.get("item", base.item),
        listing=payload.get("listing", base.listing),
    )


__all__ = ["load_site_config"]
