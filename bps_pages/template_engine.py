"""Compile the shell, item, and listing templates with Jinja2.

The adapter hides Jinja behind plain ``(context) -> str`` callables so the
renderer never touches the environment directly. Lookups of absent context
keys, including attribute chains such as ``{{ nutrition.calories }}``, render
as empty output through :class:`jinja2.ChainableUndefined`.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from jinja2 import (
    ChainableUndefined,
    Environment,
    FileSystemLoader,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    nodes,
)

from .config import TemplateNames
from .errors import TemplateError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Template


class CompiledTemplate:
    """A compiled template exposed as a pure render function."""

    def __init__(self, name: str, template: Template) -> None:
        self.name = name
        self._template = template

    def __call__(self, context: typ.Mapping[str, typ.Any]) -> str:
        """Render the template with ``context``."""
        try:
            return self._template.render(dict(context))
        except JinjaTemplateError as exc:
            msg = f"Template '{self.name}' failed to render: {exc}"
            raise TemplateError(msg) from exc


@dc.dataclass(frozen=True, slots=True)
class TemplateSet:
    """The three compiled templates used by one build."""

    shell: CompiledTemplate
    item: CompiledTemplate
    listing: CompiledTemplate


def build_environment(templates_dir: Path) -> Environment:
    """Return the Jinja environment used for every site template."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=ChainableUndefined,
        keep_trailing_newline=True,
    )


def compile_templates(
    templates_dir: Path, names: TemplateNames | None = None
) -> TemplateSet:
    """Load and compile the shell, item, and listing templates.

    Parameters
    ----------
    templates_dir : Path
        Directory containing the template sources.
    names : TemplateNames, optional
        Filenames of the three templates; defaults to ``layout.jinja``,
        ``recipe.jinja``, and ``index.jinja``.

    Returns
    -------
    TemplateSet
        Render callables for the shell, item, and listing templates.

    Raises
    ------
    TemplateError
        If a template is missing or contains invalid syntax, including
        references to unknown filters or tests.
    """
    names = names or TemplateNames()
    env = build_environment(templates_dir)
    return TemplateSet(
        shell=_compile(env, names.shell),
        item=_compile(env, names.item),
        listing=_compile(env, names.listing),
    )


def _compile(env: Environment, name: str) -> CompiledTemplate:
    try:
        template = env.get_template(name)
    except TemplateNotFound as exc:
        msg = f"Template '{name}' not found in {env.loader.searchpath}."  # type: ignore[union-attr]
        raise TemplateError(msg) from exc
    except TemplateSyntaxError as exc:
        msg = f"Template '{name}' has invalid syntax at line {exc.lineno}: {exc.message}"
        raise TemplateError(msg) from exc
    _check_helpers(env, name)
    return CompiledTemplate(name, template)


def _check_helpers(env: Environment, name: str) -> None:
    """Reject filters and tests the environment does not define.

    Jinja only checks helpers outside conditionals while compiling, so the
    whole tree is walked to catch ones that sit in branches.
    """
    source = env.loader.get_source(env, name)[0]  # type: ignore[union-attr]
    tree = env.parse(source, name=name)
    for node in tree.find_all((nodes.Filter, nodes.Test)):
        known = env.filters if isinstance(node, nodes.Filter) else env.tests
        if node.name not in known:
            kind = "filter" if isinstance(node, nodes.Filter) else "test"
            msg = (
                f"Template '{name}' uses unknown {kind} '{node.name}' "
                f"at line {node.lineno}."
            )
            raise TemplateError(msg)


__all__ = ["CompiledTemplate", "TemplateSet", "build_environment", "compile_templates"]
