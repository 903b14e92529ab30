"""Recipe site build pipeline.

This module sequences a full build of the static recipe site: it empties the
output directory, compiles the three templates, loads and sorts the recipe
records, writes one page per recipe plus ``index.html``, and finally copies
the static assets and images. The main entry point is :class:`SiteBuilder`.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from bps_pages.config import SiteConfig
>>> report = SiteBuilder(SiteConfig.from_root(Path("."))).run()  # doctest: +SKIP
>>> report.pages[-1].name  # doctest: +SKIP
'index.html'

Every step runs to completion before the next begins. The first failure
propagates to the caller; output written before the failure is left in
place.
"""

from __future__ import annotations

import dataclasses as dc
import shutil
import typing as typ

from ._constants import INDEX_FILENAME
from .assets import AssetCopier
from .errors import WriteError
from .records import load_records, sort_records
from .renderer import PageRenderer
from .reporting import ConsoleReporter, format_path
from .template_engine import compile_templates

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig


@dc.dataclass(slots=True)
class BuildReport:
    """Summary of one completed build."""

    pages: list[Path] = dc.field(default_factory=list)
    assets: list[str] = dc.field(default_factory=list)
    images: list[str] = dc.field(default_factory=list)
    warnings: list[str] = dc.field(default_factory=list)


class SiteBuilder:
    """Render the recipe site described by a :class:`SiteConfig`."""

    def __init__(
        self, site_config: SiteConfig, *, reporter: ConsoleReporter | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        site_config : SiteConfig
            Resolved locations of the data, templates, assets, and output.
        reporter : ConsoleReporter, optional
            Destination for progress and warning lines. Defaults to a
            reporter bound to the process stdout and stderr.
        """
        self.config = site_config
        self.reporter = reporter or ConsoleReporter()

    def run(self) -> BuildReport:
        """Regenerate the output directory from scratch.

        Returns
        -------
        BuildReport
            Written page paths, copied assets and images, and warnings.

        Raises
        ------
        WriteError
            If the output directory cannot be cleared or a file cannot be
            written or copied.
        TemplateError
            If a template is missing or invalid.
        NotFoundError
            If the data directory cannot be read.
        ParseError
            If a record file is malformed.
        """
        config = self.config
        report = BuildReport()
        warnings_before = len(self.reporter.warnings)

        self._reset_output_dir()
        templates = compile_templates(config.templates_dir, config.templates)
        records = sort_records(
            load_records(config.data_dir, extension=config.record_extension)
        )
        renderer = PageRenderer(templates, index_title=config.index_title)

        for record in records:
            html = renderer.render_record(record, records)
            report.pages.append(self._write_page(f"{record.slug}.html", html))
        report.pages.append(
            self._write_page(INDEX_FILENAME, renderer.render_listing(records))
        )

        copier = AssetCopier(config.asset_root, config.output_dir, reporter=self.reporter)
        report.assets = copier.copy_manifest(config.assets)
        report.images = copier.copy_images(config.images_dir)
        report.warnings = self.reporter.warnings[warnings_before:]

        self.reporter.info("Static site generation complete!")
        return report

    def _reset_output_dir(self) -> None:
        """Delete everything inside the output directory, creating it if needed."""
        output_dir = self.config.output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for entry in list(output_dir.iterdir()):
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
        except OSError as exc:
            msg = f"Could not clear output directory '{format_path(output_dir)}': {exc}"
            raise WriteError(msg) from exc

    def _write_page(self, filename: str, html: str) -> Path:
        output_path = self.config.output_dir / filename
        try:
            output_path.write_text(html, encoding="utf-8")
        except OSError as exc:
            msg = f"Could not write '{format_path(output_path)}': {exc}"
            raise WriteError(msg) from exc
        self.reporter.info(f"Generated: {filename}")
        return output_path


__all__ = ["BuildReport", "SiteBuilder"]
