"""
HUD overlay for the diorama window.
"""

from .theme import Colors, FontConfig, Fonts, Theme, get_theme
from .components import TextInput
from .hud import Hud

__all__ = [
    'Colors',
    'FontConfig',
    'Fonts',
    'Theme',
    'get_theme',
    'TextInput',
    'Hud',
]
