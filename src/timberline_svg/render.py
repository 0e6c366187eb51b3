"""Render a declarative description into SVG markup."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np

from .context import Context, evaluate
from .elements import (
    EACH,
    IF,
    RAW,
    SVG_NAMESPACE,
    TEXT,
    TEXT_ELEMENT,
    Attribute,
    Child,
    Directive,
    Entry,
    partition,
)
from .escape import escape_attr, escape_text

logger = logging.getLogger(__name__)

INDENT = "  "


@dataclass(frozen=True)
class RenderOptions:
    """Per-call rendering settings. ``indent`` is tracked by the renderer."""

    pretty: bool = False
    indent: int = 0
    logger: logging.Logger = field(default=logger, repr=False, compare=False)

    @property
    def pad(self) -> str:
        return INDENT * self.indent if self.pretty else ""

    @property
    def nl(self) -> str:
        return "\n" if self.pretty else ""

    def nested(self) -> RenderOptions:
        return replace(self, indent=self.indent + 1)


def _as_sequence(value: Any) -> Sequence | None:
    """Return ``value`` as a sequence to iterate, or None if it is not one."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return value
    return None


def render(tag: str, node: Any, ctx: Context, options: RenderOptions) -> str:
    """Render ``node`` as one or more ``tag`` elements.

    ``node`` may be a list/tuple of descriptions (siblings sharing ``tag``),
    a description mapping (optionally repeated with ``$each``), or a plain
    value which becomes the element's text.
    """
    if isinstance(node, (list, tuple)):
        return "".join(render(tag, item, ctx, options) for item in node)

    if node is None:
        return ""

    if not isinstance(node, Mapping):
        text = escape_text(evaluate(node, ctx))
        return f"{options.pad}<{tag}>{text}</{tag}>{options.nl}"

    if EACH not in node:
        return render_element(tag, partition(node), ctx, options)

    source = evaluate(node[EACH], ctx)
    items = _as_sequence(source)
    if items is None:
        options.logger.warning("%s must resolve to a sequence, got %r", EACH, source)
        return ""

    entries = partition({key: value for key, value in node.items() if key != EACH})
    return "".join(
        render_element(tag, entries, ctx.child(item, index, items), options)
        for index, item in enumerate(items)
    )


def render_element(
    tag: str,
    entries: list[Entry],
    ctx: Context,
    options: RenderOptions,
) -> str:
    """Render a single, non-repeating element from its tagged entries."""
    for entry in entries:
        if isinstance(entry, Directive) and entry.name == IF:
            if not evaluate(entry.value, ctx):
                return ""

    attributes: list[str] = []
    children: list[str] = []
    text = ""
    raw = ""

    for entry in entries:
        if isinstance(entry, Attribute):
            value = evaluate(entry.value, ctx)
            if value is None or value is False or (isinstance(value, np.bool_) and not value):
                continue
            attributes.append(f'{entry.name}="{escape_attr(value)}"')
        elif isinstance(entry, Child):
            children.append(render(entry.tag, entry.node, ctx, options.nested()))
        elif entry.name == TEXT:
            value = evaluate(entry.value, ctx)
            text = "" if value is None else escape_text(value)
        elif entry.name == RAW:
            value = evaluate(entry.value, ctx)
            raw = str(value) if value else ""

    attrs = "".join(f" {attribute}" for attribute in attributes)
    pad, nl = options.pad, options.nl
    body = "".join(children)

    if tag == TEXT_ELEMENT and text:
        return f"{pad}<{tag}{attrs}>{text}</{tag}>{nl}"

    if not (body or text or raw):
        return f"{pad}<{tag}{attrs}/>{nl}"

    inner_pad = options.nested().pad
    if text:
        body += f"{inner_pad}{text}{nl}"
    if raw:
        body += f"{inner_pad}{raw}{nl}"
    return f"{pad}<{tag}{attrs}>{nl}{body}{pad}</{tag}>{nl}"


def svg(
    definition: Mapping[str, Any],
    *,
    pretty: bool = False,
    logger: logging.Logger | None = None,
) -> str:
    """Render an ``<svg>`` document from ``definition``.

    Keys naming SVG elements become children, ``$``-directives control
    repetition, conditions and content, and every other key is written as
    an attribute. Callables are evaluated against the current
    :class:`Context`.

    Example::

        svg({
            "width": 200,
            "height": 100,
            "circle": {
                "$each": [10, 30, 50],
                "cx": lambda c: c.d * 2,
                "cy": 50,
                "r": lambda c: c.d / 5,
                "fill": "steelblue",
            },
        })
    """
    options = RenderOptions(pretty=pretty)
    if logger is not None:
        options = replace(options, logger=logger)
    entries = [Attribute("xmlns", SVG_NAMESPACE), *partition(definition)]
    return render_element("svg", entries, Context(), options).strip()
