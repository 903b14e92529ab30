"""Copy static assets and images into the generated site."""

from __future__ import annotations

import shutil
import typing as typ

from ._constants import IMAGES_DIRNAME
from .errors import WriteError
from .reporting import ConsoleReporter, format_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class AssetCopier:
    """Mirror the named static files and the images directory into the output.

    Missing manifest entries and a missing images directory are reported as
    warnings; the build carries on without them. Destination files are
    always overwritten.
    """

    def __init__(
        self,
        asset_root: Path,
        output_dir: Path,
        *,
        reporter: ConsoleReporter | None = None,
    ) -> None:
        self.asset_root = asset_root
        self.output_dir = output_dir
        self.reporter = reporter or ConsoleReporter()

    def copy_manifest(self, names: cabc.Iterable[str]) -> list[str]:
        """Copy each named file or directory found under ``asset_root``.

        Parameters
        ----------
        names : Iterable[str]
            Filenames relative to ``asset_root``. Directories are copied
            recursively.

        Returns
        -------
        list[str]
            Names that were copied, in manifest order.

        Raises
        ------
        WriteError
            If an existing asset cannot be copied.
        """
        copied: list[str] = []
        for name in names:
            source = self.asset_root / name
            if not source.exists():
                self.reporter.warn(f"Asset not found, skipped: {name}")
                continue
            if source.is_dir():
                _copy_tree(source, self.output_dir / name)
            else:
                _copy_file(source, self.output_dir / name)
            self.reporter.info(f"Copied: {name}")
            copied.append(name)
        return copied

    def copy_images(self, images_dir: Path) -> list[str]:
        """Copy every file in ``images_dir`` into ``<output>/images``.

        Returns the copied paths relative to the output directory. Entries
        that are not regular files are skipped with a warning.
        """
        if not images_dir.is_dir():
            self.reporter.warn(
                "Root images directory not found, skipped copying images from there."
            )
            return []
        target_dir = self.output_dir / IMAGES_DIRNAME
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            entries = sorted(images_dir.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            msg = (
                f"Could not prepare images directory "
                f"'{format_path(target_dir)}': {exc}"
            )
            raise WriteError(msg) from exc

        copied: list[str] = []
        for entry in entries:
            relative = f"{IMAGES_DIRNAME}/{entry.name}"
            if not entry.is_file():
                self.reporter.warn(f"Not a file, skipped: {relative}")
                continue
            _copy_file(entry, target_dir / entry.name)
            self.reporter.info(f"Copied image: {relative}")
            copied.append(relative)
        return copied


def _copy_file(source: Path, destination: Path) -> None:
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
    except OSError as exc:
        msg = (
            f"Could not copy '{format_path(source)}' "
            f"to '{format_path(destination)}': {exc}"
        )
        raise WriteError(msg) from exc


def _copy_tree(source: Path, destination: Path) -> None:
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except OSError as exc:
        msg = (
            f"Could not copy '{format_path(source)}' "
            f"to '{format_path(destination)}': {exc}"
        )
        raise WriteError(msg) from exc


__all__ = ["AssetCopier"]
