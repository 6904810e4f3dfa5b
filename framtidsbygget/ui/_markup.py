"""Minimal HTML building helpers shared by the UI primitives"""

from __future__ import annotations

from html import escape
from typing import Iterable, Mapping, Optional, Union


class Markup(str):
    """Already-escaped HTML. Plain str children are escaped, Markup is not."""


# elements the primitives may render; `as_` overrides are checked against it
ALLOWED_TAGS = frozenset(
    {
        "a", "article", "aside", "button", "div", "footer", "h1", "h2", "h3",
        "h4", "h5", "header", "label", "li", "main", "p", "section", "span",
    }
)

Child = Union[str, Markup, None]
Children = Union[Child, Iterable[Child]]


def render_children(children: Children) -> Markup:
    if children is None:
        return Markup("")
    if isinstance(children, str):
        return children if isinstance(children, Markup) else Markup(escape(children))
    return Markup("".join(render_children(c) for c in children))


def class_list(*names: Optional[str]) -> str:
    """Join non-empty class names with single spaces."""
    return " ".join(n for n in names if n)


def render_attrs(attrs: Mapping[str, object]) -> str:
    """None/False omitted, True rendered bare, everything else escaped."""
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def element(
    tag: str,
    attrs: Mapping[str, object],
    children: Children = None,
) -> Markup:
    if tag not in ALLOWED_TAGS:
        raise ValueError(f"Element not allowed: {tag!r}")
    return Markup(f"<{tag}{render_attrs(attrs)}>{render_children(children)}</{tag}>")
