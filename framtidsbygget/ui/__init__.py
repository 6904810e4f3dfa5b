"""HTML markup primitives (Button, Card, Icon, Typography)"""

from ._markup import Markup
from .button import ButtonSize, ButtonType, ButtonVariant, IconPosition, button
from .card import CardVariant, FooterAlign, card, card_content, card_footer, card_header
from .icon import IconColor, IconSize, icon
from .typography import (
    Align,
    BodySize,
    BodyWeight,
    HeadingVariant,
    TextVariant,
    body,
    caption,
    heading,
)

__all__ = [
    "Markup",
    "ButtonSize",
    "ButtonType",
    "ButtonVariant",
    "IconPosition",
    "button",
    "CardVariant",
    "FooterAlign",
    "card",
    "card_content",
    "card_footer",
    "card_header",
    "IconColor",
    "IconSize",
    "icon",
    "Align",
    "BodySize",
    "BodyWeight",
    "HeadingVariant",
    "TextVariant",
    "body",
    "caption",
    "heading",
]
