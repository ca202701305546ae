"""Generic trees with a box-drawing text rendering."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

__all__ = ["GenericTree"]

T = TypeVar("T")

_DEFAULT_INDENT = "  "
_DEFAULT_SEP = "  "


@dataclass
class GenericTree(Generic[T]):
    """A node value together with its child subtrees."""

    root: T
    children: list[GenericTree[T]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.children = list(self.children) if self.children is not None else []

    def __copy__(self) -> GenericTree[T]:
        return copy.deepcopy(self)

    def num_children(self) -> int:
        """Number of direct children."""
        return len(self.children)

    def has_children(self) -> bool:
        """Whether the tree has at least one child."""
        return self.num_children() > 0

    def add(self, other: GenericTree[T] | T) -> None:
        """Append a subtree, or a bare value as a leaf, as the last child."""
        if isinstance(other, GenericTree):
            self.children.append(other)
        else:
            self.children.append(GenericTree(other))

    @staticmethod
    def repr_node(
        node: Any,
        indent: str | None = None,
        sep: str | None = None,
        lex: Sequence[bool] | None = None,
    ) -> str:
        """Render one node, given the last-child flags of its ancestry."""
        indent = _DEFAULT_INDENT if indent is None else indent
        sep = _DEFAULT_SEP if sep is None else sep
        lex = list(lex) if lex is not None else []
        if len(lex) <= 1:
            return str(node)
        prefix = "".join(
            "" if depth == 0 else (f" {indent}" if is_last else f"│{indent}")
            for depth, is_last in enumerate(lex[:-1])
        )
        return f"{prefix}{sep}{node}"

    def repr_tree(
        self,
        indent: str | None = None,
        sep: str | None = None,
        lex: Sequence[bool] | None = None,
    ) -> list[str]:
        """Render the whole tree as a list of lines."""
        indent = _DEFAULT_INDENT if indent is None else indent
        sep = _DEFAULT_SEP if sep is None else sep
        lex = list(lex) if lex is not None else [True]

        lines = [self.repr_node(self.root, indent, sep, lex)]
        last = self.num_children() - 1
        for position, child in enumerate(self.children):
            is_final = position == last
            connector = "╮ " if child.has_children() else "─ "
            branch = "╰──" if is_final else "├──"
            lines.extend(child.repr_tree(indent, branch + connector, [*lex, is_final]))
        return lines

    def __str__(self) -> str:
        return "\n".join(self.repr_tree())