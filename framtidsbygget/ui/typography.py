"""Typography: Heading, Body, Caption"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from ._markup import Children, Markup, class_list, element

logger = logging.getLogger(__name__)


class HeadingVariant(str, Enum):
    DEFAULT = "default"
    DISPLAY = "display"


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class BodySize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class BodyWeight(str, Enum):
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"


class TextVariant(str, Enum):
    DEFAULT = "default"
    SECONDARY = "secondary"
    ERROR = "error"
    SUCCESS = "success"
    WARNING = "warning"


HEADING_LEVEL_CLASSES: dict[int, str] = {
    1: "heading--h1",
    2: "heading--h2",
    3: "heading--h3",
    4: "heading--h4",
    5: "heading--h5",
}

HEADING_ALIGN_CLASSES: dict[Align, str] = {
    Align.LEFT: "heading--align-left",
    Align.CENTER: "heading--align-center",
    Align.RIGHT: "heading--align-right",
}

BODY_SIZE_CLASSES: dict[BodySize, str] = {
    BodySize.SMALL: "body--small",
    BodySize.MEDIUM: "body--medium",
    BodySize.LARGE: "body--large",
}

BODY_WEIGHT_CLASSES: dict[BodyWeight, str] = {
    BodyWeight.REGULAR: "body--regular",
    BodyWeight.MEDIUM: "body--medium",
    BodyWeight.SEMIBOLD: "body--semibold",
}

BODY_VARIANT_CLASSES: dict[TextVariant, str] = {
    TextVariant.DEFAULT: "body--default",
    TextVariant.SECONDARY: "body--secondary",
    TextVariant.ERROR: "body--error",
    TextVariant.SUCCESS: "body--success",
    TextVariant.WARNING: "body--warning",
}

BODY_ALIGN_CLASSES: dict[Align, str] = {
    Align.LEFT: "body--align-left",
    Align.CENTER: "body--align-center",
    Align.RIGHT: "body--align-right",
}

CAPTION_VARIANT_CLASSES: dict[TextVariant, str] = {
    TextVariant.DEFAULT: "caption--default",
    TextVariant.SECONDARY: "caption--secondary",
    TextVariant.ERROR: "caption--error",
    TextVariant.SUCCESS: "caption--success",
    TextVariant.WARNING: "caption--warning",
}


def heading(
    children: Children,
    *,
    level: int,
    variant: HeadingVariant = HeadingVariant.DEFAULT,
    align: Align = Align.LEFT,
    truncate: bool = False,
    class_name: str = "",
    as_: Optional[str] = None,
) -> Markup:
    """Level 1-5. Anything else renders nothing and logs an error."""
    if level not in HEADING_LEVEL_CLASSES:
        logger.error("Heading: level must be between 1 and 5, got %r", level)
        return Markup("")
    variant = HeadingVariant(variant)
    align = Align(align)
    classes = class_list(
        "heading",
        HEADING_LEVEL_CLASSES[level],
        "heading--display" if variant == HeadingVariant.DISPLAY else None,
        HEADING_ALIGN_CLASSES[align],
        "heading--truncate" if truncate else None,
        class_name,
    )
    return element(as_ or f"h{level}", {"class": classes}, children)


def body(
    children: Children,
    *,
    size: BodySize = BodySize.MEDIUM,
    weight: BodyWeight = BodyWeight.REGULAR,
    variant: TextVariant = TextVariant.DEFAULT,
    align: Align = Align.LEFT,
    truncate: bool = False,
    class_name: str = "",
    as_: str = "p",
) -> Markup:
    size = BodySize(size)
    weight = BodyWeight(weight)
    variant = TextVariant(variant)
    align = Align(align)
    classes = class_list(
        "body",
        BODY_SIZE_CLASSES[size],
        BODY_WEIGHT_CLASSES[weight],
        BODY_VARIANT_CLASSES[variant],
        BODY_ALIGN_CLASSES[align],
        "body--truncate" if truncate else None,
        class_name,
    )
    return element(as_, {"class": classes}, children)


def caption(
    children: Children,
    *,
    variant: TextVariant = TextVariant.DEFAULT,
    uppercase: bool = False,
    class_name: str = "",
) -> Markup:
    variant = TextVariant(variant)
    classes = class_list(
        "caption",
        CAPTION_VARIANT_CLASSES[variant],
        "caption--uppercase" if uppercase else None,
        class_name,
    )
    return element("span", {"class": classes}, children)
