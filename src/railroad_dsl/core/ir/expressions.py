"""
Expression tree for railroad diagrams.

The closed set of node types produced by compiling the diagram DSL:

- Leaves: Term ("..."), NonTerm ('...'), Comment (`...`), Empty (!)
- Containers: Sequence ([...]), Stack ({...}), Choice (<...>)
- Postfix wrappers: Optional (x?), Repeat (x*sep), LabeledBox (x#label)

``str()`` of any node renders canonical DSL source for it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------


def escape(text: str, delimiter: str) -> str:
    """Backslash-escape the delimiter and backslashes in quoted text."""
    return "".join("\\" + c if c in ("\\", delimiter) else c for c in text)


def _quote(text: str, delimiter: str) -> str:
    return f"{delimiter}{escape(text, delimiter)}{delimiter}"


def _operand(expr: Expr, *loose: type[BaseModel]) -> str:
    """Render a postfix operand, bracketing it if it would rebind."""
    if isinstance(expr, loose):
        return f"[{expr}]"
    return str(expr)


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class Term(BaseModel):
    """A literal token, drawn as a terminal box."""

    text: str = Field(description="Unescaped terminal text")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _quote(self.text, '"')


class NonTerm(BaseModel):
    """A reference to a named production, drawn as a non-terminal box."""

    text: str = Field(description="Unescaped production name")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _quote(self.text, "'")


class Comment(BaseModel):
    """A free-form annotation."""

    text: str = Field(description="Unescaped comment text")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _quote(self.text, "`")


class Empty(BaseModel):
    """A zero-width placeholder."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "!"


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class Sequence(BaseModel):
    """Items drawn left to right."""

    items: list[Expr] = Field(description="Items in source order")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "[" + ", ".join(str(i) for i in self.items) + "]"


class Stack(BaseModel):
    """Items drawn top to bottom."""

    items: list[Expr] = Field(description="Items in source order")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "{" + ", ".join(str(i) for i in self.items) + "}"


class Choice(BaseModel):
    """
    Mutually exclusive alternatives.

    Order only affects placement: the first alternative is drawn on the
    main line.
    """

    items: list[Expr] = Field(description="Alternatives in source order")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "<" + ", ".join(str(i) for i in self.items) + ">"


# ---------------------------------------------------------------------------
# Postfix wrappers
# ---------------------------------------------------------------------------


class Optional(BaseModel):
    """An expression that may be skipped: ``inner?``."""

    inner: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{_operand(self.inner, Repeat, LabeledBox)}?"


class Repeat(BaseModel):
    """
    An expression that may repeat: ``body*separator``.

    The separator is drawn on the return track between repetitions.
    """

    body: Expr
    separator: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        body = _operand(self.body, Repeat, LabeledBox)
        separator = _operand(self.separator, Repeat, LabeledBox)
        return f"{body}*{separator}"


class LabeledBox(BaseModel):
    """An expression framed with a label: ``inner#label``."""

    inner: Expr
    label: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        inner = _operand(self.inner, LabeledBox)
        label = _operand(self.label, LabeledBox)
        return f"{inner}#{label}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Term | NonTerm | Comment | Empty | Sequence | Stack | Choice | Optional | Repeat | LabeledBox

# Rebuild models for recursive forward references
Sequence.model_rebuild()
Stack.model_rebuild()
Choice.model_rebuild()
Optional.model_rebuild()
Repeat.model_rebuild()
LabeledBox.model_rebuild()
