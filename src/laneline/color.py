# SPDX-License-Identifier: MIT

DEFAULT_CATEGORY_COLOR = "bright_black"

AT_RISK_COLOR = "red"
DONE_COLOR = "green"
MARKER_COLOR = "bright_red"


def get_category_color(category: str) -> str:
    """Return the Rich color used for a category's bars and row marker."""
    c = category.lower()
    if "tech" in c or "product" in c:
        return "blue"
    if "marketing" in c:
        return "purple"
    if "operations" in c:
        return "green"
    if "sales" in c:
        return "dark_orange"
    if "executive" in c:
        return "grey50"
    return DEFAULT_CATEGORY_COLOR
