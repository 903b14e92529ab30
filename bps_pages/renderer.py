"""Compose record pages and the listing page from compiled templates."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from ._constants import INDEX_TITLE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .records import Record
    from .template_engine import TemplateSet


class PageRenderer:
    """Render the item and listing views inside the shared page shell.

    The shell context is built by layering, in order: the record's own
    fields, then ``body`` and ``recipes``. A record may therefore set its own
    ``pageTitle`` or ``featuredImage``, but it can never replace the rendered
    body or the navigation collection.
    """

    def __init__(self, templates: TemplateSet, *, index_title: str = INDEX_TITLE) -> None:
        self.templates = templates
        self.index_title = index_title

    def render_record(self, record: Record, collection: cabc.Sequence[Record]) -> str:
        """Return the full HTML page for ``record``.

        Parameters
        ----------
        record : Record
            Recipe rendered through the item template.
        collection : Sequence[Record]
            Sorted records exposed to the shell as ``recipes`` for navigation.

        Returns
        -------
        str
            Shell output with the item output embedded as ``body``.
        """
        body = self.templates.item(record.context())
        context = {
            **record.context(),
            "body": Markup(body),
            "recipes": _navigation(collection),
        }
        return self.templates.shell(context)

    def render_listing(self, collection: cabc.Sequence[Record]) -> str:
        """Return the index page HTML; its title is always ``index_title``."""
        body = self.templates.listing({})
        context = {
            "pageTitle": self.index_title,
            "body": Markup(body),
            "recipes": _navigation(collection),
        }
        return self.templates.shell(context)


def _navigation(collection: cabc.Sequence[Record]) -> list[dict[str, typ.Any]]:
    return [record.context() for record in collection]


__all__ = ["PageRenderer"]
