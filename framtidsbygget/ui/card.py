"""Card with header / content / footer sections"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from ._markup import Children, Markup, class_list, element


class CardVariant(str, Enum):
    FLAT = "flat"
    ELEVATED = "elevated"
    OUTLINED = "outlined"


class FooterAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    SPACE_BETWEEN = "space-between"


VARIANT_CLASSES: dict[CardVariant, str] = {
    CardVariant.FLAT: "card--flat",
    CardVariant.ELEVATED: "card--elevated",
    CardVariant.OUTLINED: "card--outlined",
}

FOOTER_ALIGN_CLASSES: dict[FooterAlign, str] = {
    FooterAlign.LEFT: "card__footer--left",
    FooterAlign.CENTER: "card__footer--center",
    FooterAlign.RIGHT: "card__footer--right",
    FooterAlign.SPACE_BETWEEN: "card__footer--space-between",
}


def card(
    children: Children,
    *,
    variant: CardVariant = CardVariant.FLAT,
    interactive: bool = False,
    disabled: bool = False,
    clickable: bool = False,
    class_name: str = "",
    as_: str = "div",
    attrs: Optional[Mapping[str, object]] = None,
) -> Markup:
    """Clickable cards get role=button and tabindex=0 unless disabled."""
    variant = CardVariant(variant)
    active = clickable and not disabled
    classes = class_list(
        "card",
        VARIANT_CLASSES[variant],
        "card--interactive" if interactive else None,
        "card--disabled" if disabled else None,
        "card--clickable" if active else None,
        class_name,
    )
    all_attrs: dict[str, object] = {
        "class": classes,
        "tabindex": "0" if active else None,
        "role": "button" if active else None,
        "aria-disabled": "true" if disabled else None,
    }
    all_attrs.update(attrs or {})
    return element(as_, all_attrs, children)


def card_header(children: Children, *, class_name: str = "") -> Markup:
    return element("header", {"class": class_list("card__header", class_name)}, children)


def card_content(
    children: Children, *, scrollable: bool = False, class_name: str = ""
) -> Markup:
    classes = class_list(
        "card__content",
        "card__content--scrollable" if scrollable else None,
        class_name,
    )
    return element("div", {"class": classes}, children)


def card_footer(
    children: Children,
    *,
    align: FooterAlign = FooterAlign.RIGHT,
    class_name: str = "",
) -> Markup:
    align = FooterAlign(align)
    classes = class_list("card__footer", FOOTER_ALIGN_CLASSES[align], class_name)
    return element("footer", {"class": classes}, children)
