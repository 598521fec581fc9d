"""Bar colors for known languages and extensions"""

from typing import Tuple

DEFAULT_COLOR = "#808080"

LANGUAGE_COLORS = {
    "js": "#F7DF1E",
    "python": "#3776AB",
    "java": "#007396",
    "csharp": "#239120",
    "cpp": "#00599C",
    "ruby": "#CC342D",
    "php": "#777BB4",
    "swift": "#FA7343",
    "rs": "#DEA584",
    "go": "#00ADD8",
    "typescript": "#3178C6",
    "kotlin": "#A97BFF",
    "scala": "#DC322F",
    "html": "#E34F26",
    "css": "#1572B6",
    "perl": "#39457E",
    "haskell": "#5D4F85",
    "r": "#276DC3",
    "dart": "#0175C2",
    "elixir": "#4B275F",
    "clojure": "#5881D8",
    "lua": "#000080",
    "julia": "#9558B2",
    "matlab": "#0076A8",
    "shell": "#89E051",
}


def color_for(category: str) -> str:
    """Look up the color of a category, case-insensitively"""
    return LANGUAGE_COLORS.get(category.lower(), DEFAULT_COLOR)


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert '#RRGGBB' to an (r, g, b) tuple"""
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
