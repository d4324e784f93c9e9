"""
Platform catalogue offered by the game form.

The data layer never validates a record's platform against this list.
"""
from typing import Dict, List

PLATFORM_COLORS: Dict[str, str] = {
    "3DO": "#FFD700",
    "Atari 2600": "#8B4513",
    "Atari 5200": "#A0522D",
    "Atari 7800": "#D2691E",
    "Atari Jaguar": "#5C4033",
    "Atari Lynx": "#CD853F",
    "Colecovision": "#C0C0C0",
    "Hyperscan": "#00FFFF",
    "Intellivision": "#800020",
    "Nintendo NES": "#FF0000",
    "Super Nintendo": "#800080",
    "Game Boy": "#808080",
    "Game Boy Advance": "#9370DB",
    "Nintendo 64": "#90EE90",
    "Nintendo GameCube": "#483D8B",
    "Nintendo DS": "#B22222",
    "Nintendo 3DS": "#FF6347",
    "Wii": "#FFFFFF",
    "Wii U": "#ADD8E6",
    "Nintendo Switch": "#FF4500",
    "Nintendo Switch 2": "#DC143C",
    "PlayStation": "#A9A9A9",
    "PlayStation 2": "#0000CD",
    "PlayStation 3": "#1E90FF",
    "PlayStation 4": "#87CEEB",
    "PlayStation 5": "#00008B",
    "Sega Master System": "#8B0000",
    "Sega Genesis": "#000000",
    "Sega Game Gear": "#6A5ACD",
    "Sega Saturn": "#000080",
    "Sega Dreamcast": "#FFA500",
    "Steam": "#D3D3D3",
    "PC": "#F5F5DC",
    "Xbox": "#107C10",
    "Xbox 360": "#33A02C",
    "Xbox One": "#006400",
    "Xbox Series X/S": "#228B22",
}

# Sorted alphabetically for the platform selector
PLATFORMS: List[str] = sorted(PLATFORM_COLORS)

DEFAULT_PLATFORM_COLOR = "#888888"


def platform_color(platform: str) -> str:
    """Display color for a platform, with a neutral fallback."""
    return PLATFORM_COLORS.get(platform, DEFAULT_PLATFORM_COLOR)
