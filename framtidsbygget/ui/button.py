"""Button"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from ._markup import Children, Markup, class_list, element, render_children


class ButtonVariant(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DANGER = "danger"


class ButtonSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class IconPosition(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class ButtonType(str, Enum):
    BUTTON = "button"
    SUBMIT = "submit"
    RESET = "reset"


VARIANT_CLASSES: dict[ButtonVariant, str] = {
    ButtonVariant.PRIMARY: "button--primary",
    ButtonVariant.SECONDARY: "button--secondary",
    ButtonVariant.DANGER: "button--danger",
}

SIZE_CLASSES: dict[ButtonSize, str] = {
    ButtonSize.SMALL: "button--small",
    ButtonSize.MEDIUM: "button--medium",
    ButtonSize.LARGE: "button--large",
}

ICON_POSITION_CLASSES: dict[IconPosition, str] = {
    IconPosition.LEFT: "button__icon--left",
    IconPosition.RIGHT: "button__icon--right",
}


def _icon(icon: str, position: IconPosition, with_text: bool) -> Markup:
    classes = class_list(
        "material-symbols-outlined",
        "button__icon",
        ICON_POSITION_CLASSES[position] if with_text else None,
    )
    return element("span", {"class": classes, "aria-hidden": "true"}, icon)


def button(
    children: Children = None,
    *,
    variant: ButtonVariant = ButtonVariant.PRIMARY,
    size: ButtonSize = ButtonSize.MEDIUM,
    disabled: bool = False,
    full_width: bool = False,
    icon: Optional[str] = None,
    icon_position: IconPosition = IconPosition.LEFT,
    class_name: str = "",
    type_: ButtonType = ButtonType.BUTTON,
    attrs: Optional[Mapping[str, object]] = None,
) -> Markup:
    """Render a <button>. Icon-only buttons get aria-label "<icon> button"."""
    variant = ButtonVariant(variant)
    size = ButtonSize(size)
    icon_position = IconPosition(icon_position)
    type_ = ButtonType(type_)

    text = render_children(children)
    icon_only = not text and bool(icon)

    classes = class_list(
        "button",
        VARIANT_CLASSES[variant],
        SIZE_CLASSES[size],
        "button--full-width" if full_width else None,
        "button--disabled" if disabled else None,
        "button--icon-only" if icon_only else None,
        class_name,
    )

    parts: list[Markup] = []
    icon_markup = _icon(icon, icon_position, bool(text)) if icon else None
    if icon_markup and icon_position == IconPosition.LEFT:
        parts.append(icon_markup)
    if text:
        parts.append(element("span", {"class": "button__text"}, text))
    if icon_markup and icon_position == IconPosition.RIGHT:
        parts.append(icon_markup)

    all_attrs: dict[str, object] = {
        "type": type_.value,
        "class": classes,
        "disabled": disabled,
        "aria-label": f"{icon} button" if icon_only else None,
    }
    all_attrs.update(attrs or {})
    return element("button", all_attrs, parts)
