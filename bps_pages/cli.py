"""Cyclopts CLI entrypoint for building the Bread Poets' Society site.

The ``bps-pages`` console script renders every recipe record into a static
HTML page, writes the ``index.html`` listing page, and copies static assets
into the output directory. Typical usage is ``bps-pages build`` from the
project root, or ``bps-pages build --config config/site.yaml`` when the
layout differs from the defaults.

Examples
--------
Build the site from the current directory:

>>> from bps_pages.cli import main
>>> main(["build"])  # doctest: +SKIP
0

Build into a custom directory:

>>> main(["build", "--output-dir", "dist"])  # doctest: +SKIP
0
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import SiteBuilder
from .config import SiteConfig, load_site_config
from .reporting import ConsoleReporter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="bps-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def resolve_site_config(
    *,
    config: Path | None = None,
    root: Path | None = None,
    output_dir: Path | None = None,
    data_dir: Path | None = None,
    templates_dir: Path | None = None,
) -> SiteConfig:
    """Return the site config from ``config`` (or defaults) with overrides applied.

    When neither ``config`` nor ``root`` is given the default
    ``config/site.yaml`` is used if it exists, otherwise the conventional
    layout under ``root`` (default: the current directory).
    """
    if config is None and root is None and DEFAULT_CONFIG.exists():
        config = DEFAULT_CONFIG
    if config is not None:
        site_config = load_site_config(config)
    else:
        site_config = SiteConfig.from_root(root or Path())

    overrides: dict[str, Path] = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if data_dir is not None:
        overrides["data_dir"] = data_dir
    if templates_dir is not None:
        overrides["templates_dir"] = templates_dir
    return dc.replace(site_config, **overrides)


@app.command(help="Render recipe pages and copy static assets into the output.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    root: typ.Annotated[
        Path | None,
        Parameter(
            help="Site root used when no config file is present",
            env_var="INPUT_ROOT",
        ),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    data_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the recipe data folder", env_var="INPUT_DATA_DIR"),
    ] = None,
    templates_dir: typ.Annotated[
        Path | None,
        Parameter(
            help="Override the templates folder", env_var="INPUT_TEMPLATES_DIR"
        ),
    ] = None,
) -> None:
    """Build the static site.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file. Defaults to
        ``config/site.yaml`` when that file exists.
    root : Path or None, optional
        Root of the conventional layout used when no config file applies.
    output_dir : Path or None, optional
        Directory to regenerate instead of the configured one.
    data_dir : Path or None, optional
        Directory of recipe records to read instead of the configured one.
    templates_dir : Path or None, optional
        Directory of templates to use instead of the configured one.

    Returns
    -------
    None
        Writes the site; progress lines are printed by the builder.
    """
    site_config = resolve_site_config(
        config=config,
        root=root,
        output_dir=output_dir,
        data_dir=data_dir,
        templates_dir=templates_dir,
    )
    SiteBuilder(site_config).run()


def main(argv: cabc.Sequence[str] | None = None) -> int:
    """Run the CLI and convert any build failure into a non-zero exit status.

    Parameters
    ----------
    argv : Sequence[str] or None, optional
        Arguments to parse; defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        ``0`` on success, ``1`` when the build raised.

    Examples
    --------
    >>> main(["build", "--root", "site"])  # doctest: +SKIP
    0
    """
    try:
        app(list(argv) if argv is not None else None)
    except Exception as exc:  # noqa: BLE001 - single top-level failure boundary
        ConsoleReporter().error(f"Error during site generation: {exc}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
