"""Key classification for description nodes.

Every key of a description mapping is exactly one of:

* structural: an SVG element name from ``SVG_ELEMENTS``; its value nests,
* directive: one of the reserved ``$`` keys in ``DIRECTIVES``,
* attribute: anything else.

``partition`` turns a mapping into a list of tagged entries so the
renderer switches on the entry type instead of re-deriving it from names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Element names that may nest. Anything not listed is an attribute.
SVG_ELEMENTS = frozenset({
    "svg", "g", "defs", "symbol", "use", "title", "desc",
    "rect", "circle", "ellipse", "line", "polyline", "polygon", "path",
    "text", "tspan", "textPath",
    "image", "foreignObject",
    "linearGradient", "radialGradient", "stop", "pattern",
    "clipPath", "mask", "filter",
    "feBlend", "feColorMatrix", "feComponentTransfer", "feComposite",
    "feConvolveMatrix", "feDiffuseLighting", "feDisplacementMap",
    "feDropShadow", "feFlood", "feGaussianBlur", "feImage", "feMerge",
    "feMergeNode", "feMorphology", "feOffset", "feSpecularLighting",
    "feTile", "feTurbulence", "marker", "animate", "animateMotion",
    "animateTransform", "set", "a",
})

# Directives
EACH = "$each"
IF = "$if"
TEXT = "$text"
RAW = "$raw"
KEY = "$key"  # accepted, no rendering effect

DIRECTIVES = frozenset({EACH, IF, TEXT, RAW, KEY})

# The one element whose text stays on the same line as its tags
TEXT_ELEMENT = "text"


class KeyKind(Enum):
    STRUCTURAL = "structural"
    DIRECTIVE = "directive"
    ATTRIBUTE = "attribute"


@dataclass(frozen=True)
class Attribute:
    name: str
    value: Any


@dataclass(frozen=True)
class Child:
    tag: str
    node: Any


@dataclass(frozen=True)
class Directive:
    name: str
    value: Any


Entry = Union[Attribute, Child, Directive]


def classify(key: str) -> KeyKind:
    """Classify a description key. Total: unknown keys are attributes."""
    if key in SVG_ELEMENTS:
        return KeyKind.STRUCTURAL
    if key in DIRECTIVES:
        return KeyKind.DIRECTIVE
    return KeyKind.ATTRIBUTE


def partition(definition: Mapping[str, Any]) -> list[Entry]:
    """Tag each key/value pair of ``definition``, preserving key order."""
    entries: list[Entry] = []
    for key, value in definition.items():
        kind = classify(key)
        if kind is KeyKind.STRUCTURAL:
            entries.append(Child(key, value))
        elif kind is KeyKind.DIRECTIVE:
            entries.append(Directive(key, value))
        else:
            entries.append(Attribute(key, value))
    return entries
