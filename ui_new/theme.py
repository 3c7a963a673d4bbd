"""
UI Theme - HUD overlay style

Colors and fonts for the text drawn over the diorama (search box, status
line, footer, placeholder caption). The diorama itself is drawn on a low-res
canvas; the HUD is drawn afterwards at full window resolution, so its font
sizes follow the window height rather than the pixel scale.
"""

import pygame
from typing import Dict, Optional, Tuple
from dataclasses import dataclass


class Colors:
    """
    HUD color palette

    Light text on translucent dark panels so it stays readable over both a
    noon sky and a midnight one.
    """

    # Panels (RGBA)
    PANEL = (10, 10, 20, 170)
    PANEL_INPUT = (20, 20, 35, 220)

    # Text
    FG_PRIMARY = (240, 240, 240)
    FG_DIM = (170, 170, 185)
    FG_DARK = (110, 110, 125)

    # Search box outline
    OUTLINE_IDLE = (140, 140, 160)
    OUTLINE_TYPING = (255, 215, 0)

    ERROR = (255, 90, 90)


@dataclass
class FontConfig:
    """Pixel-ish monospace faces, tried in order"""
    families: Tuple[str, ...] = ("Consolas", "Courier New", "DejaVu Sans Mono", "monospace")
    caption: int = 28
    small: int = 14


class Fonts:
    """
    HUD font cache

    SysFont quietly returns pygame's default face when a family is missing,
    so the lookup walks the family list with match_font() instead.
    """

    _config = FontConfig()
    _cache: Dict[Tuple[str, int], pygame.font.Font] = {}

    @classmethod
    def initialize(cls, config: Optional[FontConfig] = None):
        if config is not None:
            cls._config = config
            cls._cache.clear()
        pygame.font.init()

    @classmethod
    def _load(cls, role: str) -> pygame.font.Font:
        size = getattr(cls._config, role)
        key = (role, size)
        font = cls._cache.get(key)
        if font is not None:
            return font

        for family in cls._config.families:
            path = pygame.font.match_font(family)
            if not path:
                continue
            try:
                font = pygame.font.Font(path, size)
                break
            except (pygame.error, OSError):
                continue
        if font is None:
            font = pygame.font.Font(None, size)
        font.set_bold(role == "caption")

        cls._cache[key] = font
        return font

    @classmethod
    def large(cls) -> pygame.font.Font:
        return cls._load("caption")

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls._load("small")


class Theme:
    """Colors, fonts and spacing for the HUD"""

    def __init__(self):
        self.colors = Colors()
        self.fonts = Fonts()

        self.padding = 8
        self.margin = 12
        self.outline_width = 2
        self.input_height = 28

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   rgba: Optional[Tuple[int, int, int, int]] = None):
        """Translucent background panel."""
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(rgba or self.colors.PANEL)
        surface.blit(panel, rect.topleft)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: Tuple[int, int, int],
                  align: str = 'left') -> pygame.Rect:
        """
        Blit one line of text without antialiasing (it sits on pixel art)

        align is 'left', 'center' or 'right' relative to x.
        """
        rendered = font.render(text, False, color)
        rect = rendered.get_rect(top=y)
        if align == 'center':
            rect.centerx = x
        elif align == 'right':
            rect.right = x
        else:
            rect.left = x
        surface.blit(rendered, rect)
        return rect


# Global theme instance
_theme = None

def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
