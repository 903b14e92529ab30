"""Load recipe records from a directory of JSON-LD files.

Each ``*.jsonld`` file in the data directory holds one JSON object describing a
recipe. Only ``slug`` and ``headline`` are required; every other key is passed
through untouched to the templates. Records are sorted by headline with a
locale-style collation key so navigation order is stable across builds.

Examples
--------
>>> from pathlib import Path
>>> records = sort_records(load_records(Path("data/recipes")))  # doctest: +SKIP
>>> [record.slug for record in records]  # doctest: +SKIP
['crispy-pork', 'lemony-chickpea', 'pancakes']
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ
import unicodedata
from pathlib import Path
from types import MappingProxyType

from ._constants import RECORD_EXTENSION
from .errors import NotFoundError, ParseError
from .reporting import format_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

REQUIRED_FIELDS = ("slug", "headline")


@dc.dataclass(frozen=True, slots=True)
class Record:
    """A single recipe parsed from one data file.

    Attributes
    ----------
    slug : str
        Output filename stem for the recipe page.
    headline : str
        Display title, also used as the sort key.
    fields : Mapping[str, Any]
        Read-only view of every key in the source file, including ``slug``
        and ``headline``.
    source : Path
        File the record was parsed from.
    """

    slug: str
    headline: str
    fields: typ.Mapping[str, typ.Any]
    source: Path

    @classmethod
    def from_mapping(cls, data: dict[str, typ.Any], *, source: Path) -> Record:
        """Build a record from parsed JSON, checking the required keys exist."""
        for key in REQUIRED_FIELDS:
            value = data.get(key)
            if not isinstance(value, str):
                msg = f"{format_path(source)}: record is missing a string '{key}' field."
                raise ParseError(msg)
        return cls(
            slug=data["slug"],
            headline=data["headline"],
            fields=MappingProxyType(dict(data)),
            source=source,
        )

    def context(self) -> dict[str, typ.Any]:
        """Return a fresh template context containing every record field."""
        return dict(self.fields)


def load_records(
    directory: Path, *, extension: str = RECORD_EXTENSION
) -> list[Record]:
    """Parse every file ending in ``extension`` under ``directory``.

    Parameters
    ----------
    directory : Path
        Directory containing the record files. Subdirectories are ignored.
    extension : str, optional
        Filename suffix that marks a record file. Defaults to ``".jsonld"``.

    Returns
    -------
    list[Record]
        One record per matching file, in filename order.

    Raises
    ------
    NotFoundError
        If ``directory`` does not exist or cannot be listed.
    ParseError
        If a file cannot be decoded, is not a JSON object, or lacks a
        required field.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        msg = f"Data directory '{format_path(directory)}' could not be read: {exc}"
        raise NotFoundError(msg) from exc

    records: list[Record] = []
    for entry in entries:
        if entry.name.endswith(extension) and entry.is_file():
            records.append(_load_record(entry))
    return records


def _load_record(path: Path) -> Record:
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        msg = f"{format_path(path)}: invalid JSON: {exc}"
        raise ParseError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"{format_path(path)}: top-level JSON value must be an object."
        raise ParseError(msg)
    return Record.from_mapping(loaded, source=path)


def collation_key(text: str) -> tuple[str, str, str]:
    """Return a locale-style sort key for ``text``.

    The first element ignores accents and case, the second restores accents,
    and the third orders lowercase before uppercase. Strings that compare
    equal on all three are identical, so a stable sort keeps their input
    order.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), decomposed.casefold(), decomposed.swapcase()


def sort_records(records: cabc.Iterable[Record]) -> list[Record]:
    """Return ``records`` sorted by headline; ties keep their input order."""
    return sorted(records, key=lambda record: collation_key(record.headline))


__all__ = [
    "REQUIRED_FIELDS",
    "Record",
    "collation_key",
    "load_records",
    "sort_records",
]
