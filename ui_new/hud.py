"""
HUD — full-resolution overlay drawn on top of the upscaled diorama.

    top-left   search box (toggled with M) and status line
    bottom     footer: location, local time, phase, scene, time warp, keys
    centre     "Fetching weather..." while nothing has loaded yet
"""

import pygame
from typing import Callable, Optional

from atmosphere.day_phase import ResolvedTheme, phase_label
from core.astro_time import format_clock
from core.time_controller import SceneClock
from game.state_manager import StateManager
from .components import TextInput
from .theme import get_theme


KEY_HINTS = "[1/2/3/Tab] scene  [M] search  [+/-] warp  [ / ] hour  [R] realtime  [F11] fullscreen"


class Hud:
    """
    Overlay widgets

    Args:
        state_manager: read for status, location and scene
        clock: read for the time-warp label
        on_search: called with the text typed in the search box
    """

    def __init__(self, state_manager: StateManager, clock: SceneClock,
                 on_search: Callable[[str], None]):
        self.theme = get_theme()
        self.state_manager = state_manager
        self.clock = clock
        self.search_visible = True
        self.search_box = TextInput(self.theme.margin, self.theme.margin, 260,
                                    placeholder="Search city...", on_submit=on_search)

    @property
    def captures_keys(self) -> bool:
        """True while typing, so scene hotkeys must not fire."""
        return self.search_visible and self.search_box.active

    def toggle_search(self):
        self.search_visible = not self.search_visible
        if not self.search_visible:
            self.search_box.active = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.search_visible:
            return False
        return self.search_box.handle_event(event)

    def update(self, dt: float):
        self.search_box.update(dt)

    def draw(self, surface: pygame.Surface, theme: Optional[ResolvedTheme]):
        colors = self.theme.colors
        fonts = self.theme.fonts
        state = self.state_manager.state

        if self.search_visible:
            self.search_box.draw(surface)
            if state.status.text:
                color = colors.ERROR if state.status.is_error else colors.FG_DIM
                self.theme.draw_text(surface, fonts.small(),
                                     self.search_box.rect.x,
                                     self.search_box.rect.bottom + 4,
                                     state.status.text, color)

        if not state.weather.loaded:
            self.theme.draw_text(surface, fonts.large(),
                                 surface.get_width() // 2, surface.get_height() // 2 - 14,
                                 "Fetching weather...", colors.FG_DIM, align='center')

        self._draw_footer(surface, theme)

    def _draw_footer(self, surface: pygame.Surface, theme: Optional[ResolvedTheme]):
        font = self.theme.fonts.small()
        height = font.get_linesize() * 2 + self.theme.padding * 2
        rect = pygame.Rect(0, surface.get_height() - height, surface.get_width(), height)
        self.theme.draw_panel(surface, rect)

        # one read, so place and weather always come from the same fetch
        conditions = self.state_manager.state.conditions
        location = conditions.location
        parts = [location.display_name if location is not None else "Locating..."]
        if theme is not None and conditions.weather.loaded:
            parts.append(f"{format_clock(theme.hour)} {phase_label(theme.hour)}")
            if theme.overcast:
                parts.append("overcast")
        parts.append(self.state_manager.current_scene.name)
        if not self.clock.is_realtime:
            parts.append(f"warp {self.clock.speed_label}")

        x = rect.x + self.theme.padding
        y = rect.y + self.theme.padding
        self.theme.draw_text(surface, font, x, y, "  |  ".join(parts),
                             self.theme.colors.FG_PRIMARY)
        self.theme.draw_text(surface, font, x, y + font.get_linesize(), KEY_HINTS,
                             self.theme.colors.FG_DIM)
