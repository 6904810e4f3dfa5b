"""Icon (Material Symbols ligature)"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from ._markup import Markup, class_list, element


class IconSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class IconColor(str, Enum):
    DEFAULT = "default"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    ON_PRIMARY = "on-primary"


SIZE_CLASSES: dict[IconSize, str] = {
    IconSize.SMALL: "icon--small",
    IconSize.MEDIUM: "icon--medium",
    IconSize.LARGE: "icon--large",
    IconSize.XLARGE: "icon--xlarge",
}

COLOR_CLASSES: dict[IconColor, str] = {
    IconColor.DEFAULT: "icon--default",
    IconColor.PRIMARY: "icon--primary",
    IconColor.SECONDARY: "icon--secondary",
    IconColor.SUCCESS: "icon--success",
    IconColor.ERROR: "icon--error",
    IconColor.WARNING: "icon--warning",
    IconColor.INFO: "icon--info",
    IconColor.ON_PRIMARY: "icon--on-primary",
}


def icon(
    name: str,
    *,
    size: IconSize = IconSize.MEDIUM,
    color: IconColor = IconColor.DEFAULT,
    interactive: bool = False,
    spinning: bool = False,
    pulse: bool = False,
    class_name: str = "",
    aria_label: Optional[str] = None,
    aria_hidden: bool = False,
    attrs: Optional[Mapping[str, object]] = None,
) -> Markup:
    """Interactive icons render as <button>, others as <span>.

    aria-label: explicit label, else the icon name when interactive.
    aria-hidden: forced, or implied for decorative (non-interactive, unlabelled) icons.
    role=img: labelled, non-interactive icons.
    """
    size = IconSize(size)
    color = IconColor(color)
    classes = class_list(
        "material-symbols-outlined",
        "icon",
        SIZE_CLASSES[size],
        COLOR_CLASSES[color],
        "icon--interactive" if interactive else None,
        "icon--spinning" if spinning else None,
        "icon--pulse" if pulse else None,
        class_name,
    )
    hidden = aria_hidden or (not interactive and not aria_label)
    all_attrs: dict[str, object] = {
        "class": classes,
        "type": "button" if interactive else None,
        "aria-label": aria_label or (name if interactive else None),
        "aria-hidden": "true" if hidden else None,
        "role": "img" if aria_label and not interactive else None,
    }
    all_attrs.update(attrs or {})
    return element("button" if interactive else "span", all_attrs, name)
