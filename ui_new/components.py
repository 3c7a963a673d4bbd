"""
UI Components - HUD widgets

- TextInput: the city search field
"""

import pygame
from typing import Callable, Optional
from .theme import get_theme


CURSOR_BLINK_S = 0.5


class TextInput:
    """
    Single-line search field

    Click to focus, type, Enter submits the trimmed text to on_submit and
    keeps the field focused so a typo can be fixed and resent. Esc drops
    focus without clearing. While focused every key press is consumed.
    """

    def __init__(self, x: int, y: int, width: int,
                 placeholder: str = "", max_length: int = 50,
                 on_submit: Optional[Callable[[str], None]] = None):
        self.theme = get_theme()
        self.rect = pygame.Rect(x, y, width, self.theme.input_height)
        self.text = ""
        self.placeholder = placeholder
        self.max_length = max_length
        self.on_submit = on_submit
        self.active = False
        self._blink_on = True
        self._blink_t = 0.0

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was consumed."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.active = self.rect.collidepoint(event.pos)
            return self.active

        if not self.active or event.type != pygame.KEYDOWN:
            return False

        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.submit()
        elif event.key == pygame.K_ESCAPE:
            self.active = False
        elif event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif event.unicode and event.unicode.isprintable():
            self.text = (self.text + event.unicode)[:self.max_length]
        return True

    def submit(self):
        query = self.text.strip()
        if query and self.on_submit is not None:
            self.on_submit(query)

    def update(self, dt: float):
        self._blink_t += dt
        if self._blink_t > CURSOR_BLINK_S:
            self._blink_on = not self._blink_on
            self._blink_t = 0.0

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        self.theme.draw_panel(surface, self.rect, colors.PANEL_INPUT)
        outline = colors.OUTLINE_TYPING if self.active else colors.OUTLINE_IDLE
        pygame.draw.rect(surface, outline, self.rect, self.theme.outline_width)

        font = self.theme.fonts.small()
        pad = self.theme.padding
        text_y = self.rect.centery - font.get_linesize() // 2
        if self.text:
            drawn = self.theme.draw_text(surface, font, self.rect.x + pad, text_y,
                                         self.text, colors.FG_PRIMARY)
            caret_x = drawn.right + 2
        else:
            self.theme.draw_text(surface, font, self.rect.x + pad, text_y,
                                 self.placeholder, colors.FG_DARK)
            caret_x = self.rect.x + pad

        if self.active and self._blink_on:
            pygame.draw.line(surface, colors.FG_PRIMARY,
                             (caret_x, text_y), (caret_x, text_y + font.get_linesize()), 2)
