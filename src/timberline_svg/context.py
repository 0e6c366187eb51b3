"""Iteration context and value resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, TypeVar, Union

T = TypeVar("T")

# A slot value: either literal, or computed from the active context
DynamicValue = Union[T, Callable[["Context"], T]]


@dataclass(frozen=True)
class Context:
    """What a computed value sees while its element is being rendered.

    One context is created per ``$each`` item; ``parent`` is the context
    that was active where that ``$each`` was entered (``None`` at the root).
    """

    d: Any = None
    i: int = 0
    data: Sequence[Any] = field(default=(), repr=False)
    parent: Context | None = field(default=None, repr=False)

    @property
    def value(self) -> Any:
        """Alias for ``d``."""
        return self.d

    @property
    def index(self) -> int:
        """Alias for ``i``."""
        return self.i

    def child(self, item: Any, index: int, data: Sequence[Any]) -> Context:
        """Context for one item of a nested ``$each``."""
        return Context(d=item, i=index, data=data, parent=self)


def evaluate(value: DynamicValue, ctx: Context) -> Any:
    """Call ``value`` with ``ctx`` if it is callable, else return it as-is."""
    return value(ctx) if callable(value) else value
