"""
DayPhase — colore del cielo in funzione dell'ora locale.

La giornata è descritta da una tabella di keyframe ordinata per ora (0 → 24).
Tra due keyframe consecutivi il colore del cielo viene interpolato
linearmente; due keyframe con la stessa ora "bloccano" il colore (nessuna
interpolazione, si tiene quello di partenza).

Ogni keyframe definisce:
  - ora di inizio (0-24)
  - colore del cielo (#rrggbb)
  - visibilità del Sole (altrimenti si disegna la Luna e le stelle)
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple, TYPE_CHECKING

from core.color import lerp_color
from .weather import WeatherState, apply_weather_overlay

if TYPE_CHECKING:
    from scenes.base_scene import SceneDefinition


@dataclass(frozen=True)
class ThemeKeyframe:
    """Un punto della giornata."""
    hour:        float
    sky:         str
    sun_visible: bool
    label:       str = ""


@dataclass(frozen=True)
class ResolvedTheme:
    """Colori e flag del frame corrente. Ricalcolato ad ogni tick."""
    sky:         str
    ground:      str
    sun_visible: bool
    overcast:    bool
    hour:        float


DEFAULT_KEYFRAMES: Tuple[ThemeKeyframe, ...] = (
    ThemeKeyframe(0.0,   "#05050a", False, "Midnight"),
    ThemeKeyframe(6.25,  "#2c1647", False, "Pre-dawn"),
    ThemeKeyframe(6.5,   "#ff7e5f", True,  "Sunrise"),
    ThemeKeyframe(6.75,  "#87ceeb", True,  "Morning"),
    ThemeKeyframe(13.0,  "#87ceeb", True,  "Afternoon"),
    ThemeKeyframe(17.25, "#87ceeb", True,  "Evening"),
    ThemeKeyframe(17.5,  "#feb47b", True,  "Sunset"),
    ThemeKeyframe(17.75, "#1a1a2e", False, "Dusk"),
    ThemeKeyframe(20.0,  "#1a1a2e", False, "Night"),
    ThemeKeyframe(24.0,  "#05050a", False, "Midnight"),
)


def validate_keyframes(keyframes: Sequence[ThemeKeyframe]) -> None:
    """La tabella deve coprire 0-24 senza buchi e non decrescere mai."""
    if len(keyframes) < 2:
        raise ValueError("a keyframe table needs at least two rows")
    if keyframes[0].hour != 0.0 or keyframes[-1].hour != 24.0:
        raise ValueError("keyframe table must start at hour 0 and end at hour 24")
    for prev, cur in zip(keyframes, keyframes[1:]):
        if cur.hour < prev.hour:
            raise ValueError(
                f"keyframe hours must be non-decreasing ({prev.hour} > {cur.hour})")


def enclosing_keyframes(hour: float,
                        keyframes: Sequence[ThemeKeyframe] = DEFAULT_KEYFRAMES
                        ) -> Tuple[ThemeKeyframe, ThemeKeyframe]:
    """Prima coppia (start, end) con hour <= end.hour; altrimenti l'ultima."""
    for start, end in zip(keyframes, keyframes[1:]):
        if hour <= end.hour:
            return start, end
    return keyframes[-2], keyframes[-1]


def resolve_sky(hour: float,
                keyframes: Sequence[ThemeKeyframe] = DEFAULT_KEYFRAMES
                ) -> Tuple[str, bool]:
    """Colore del cielo e visibilità del Sole all'ora data."""
    start, end = enclosing_keyframes(hour, keyframes)
    span = end.hour - start.hour
    if span == 0:
        # Keyframe di blocco: nessuna interpolazione
        return start.sky, start.sun_visible
    factor = (hour - start.hour) / span
    return lerp_color(start.sky, end.sky, factor), start.sun_visible


def phase_label(hour: float,
                keyframes: Sequence[ThemeKeyframe] = DEFAULT_KEYFRAMES) -> str:
    return enclosing_keyframes(hour, keyframes)[0].label


def resolve_theme(hour: float, scene: 'SceneDefinition', weather: WeatherState,
                  keyframes: Sequence[ThemeKeyframe] = DEFAULT_KEYFRAMES
                  ) -> ResolvedTheme:
    """
    Tema completo del frame.

    Il colore del terreno non sta nella tabella: è il colore giorno/notte
    della scena attiva, scelto da sun_visible. Pioggia e neve hanno
    precedenza su tutto (vedi apply_weather_overlay).
    """
    sky, sun_visible = resolve_sky(hour, keyframes)
    ground = scene.day_color if sun_visible else scene.night_color
    theme = ResolvedTheme(sky=sky, ground=ground, sun_visible=sun_visible,
                          overcast=False, hour=hour)
    return apply_weather_overlay(theme, weather, scene.night_color)
