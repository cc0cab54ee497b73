# SPDX-License-Identifier: MIT

from typing import Optional

DEFAULT_ICON = "✔️"


def format_icon(icon: Optional[str]) -> str:
    return icon if icon else DEFAULT_ICON


def heatmap_style(count: int) -> str:
    """Rich style for a calendar day, darker as the day gets busier."""
    if count == 0:
        return "grey42"
    if count <= 2:
        return "black on light_sky_blue1"
    if count <= 5:
        return "black on sky_blue2"
    return "black on deep_sky_blue1"


def format_difference(difference: int) -> str:
    if difference > 0:
        return f"+{difference}"
    return str(difference)
