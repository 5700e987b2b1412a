"""
Builder for indexed-access TypeScript type expressions.

A reference like ``/a/b`` against the root type ``Foo`` becomes
``NonNullable<NonNullable<Foo["a"]>["b"]>``: every index step looks up a
property and strips ``null``/``undefined`` so optional parents can still be
indexed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass
class TypeExpression:
    """A root type name followed by a chain of property lookups."""

    root: str
    keys: list[str] = field(default_factory=list)

    def index(self, key: str | int) -> TypeExpression:
        """Return a new expression with one more lookup appended."""
        return TypeExpression(self.root, [*self.keys, str(key)])

    @classmethod
    def from_path(cls, root: str, segments: list[str]) -> TypeExpression:
        expression = cls(root)
        for segment in segments:
            expression = expression.index(segment)
        return expression

    def render(self) -> str:
        prefix = ""
        suffix = ""
        for key in self.keys:
            prefix += "NonNullable<"
            suffix += f"[{quote_key(key)}]>"
        return f"{prefix}{self.root}{suffix}"

    def __str__(self) -> str:
        return self.render()


def quote_key(key: str) -> str:
    """Quote a property name as a TypeScript string literal."""
    return json.dumps(key, ensure_ascii=False)
