"""
Pixel Weather Diorama - Main Application

A pixel-art landscape whose sky follows the local time at a chosen place
and whose weather follows the live conditions there:
- Day-cycle sky colours and a sun/moon arc
- Clouds, rain and snow from Open-Meteo
- Pasture, city and beach scenes
"""

import pygame
import sys
import traceback
from pathlib import Path
from typing import Optional, Sequence

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from atmosphere.open_meteo import GeoLocation
from atmosphere.weather_fetcher import WeatherFetcher
from core.time_controller import SceneClock
from game.animation_loop import AnimationLoop
from game.config import TITLE, DioramaConfig
from game.state_manager import StateManager
from scenes import SceneKind, next_scene_kind
from ui_new.hud import Hud

SCENE_KEYS = {
    pygame.K_1: SceneKind.PASTURE,
    pygame.K_2: SceneKind.CITY,
    pygame.K_3: SceneKind.BEACH,
}

HOUR_S = 3600


class DioramaApp:
    """
    Main application

    Owns the window, the host repaint loop and the wiring between the
    fetcher, the state manager, the animation loop and the HUD.
    """

    def __init__(self, config: DioramaConfig):
        self.config = config
        pygame.init()

        self.fullscreen = False
        self.screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.host_clock = pygame.time.Clock()

        canvas_w, canvas_h = config.canvas_size
        self.canvas = pygame.Surface((canvas_w, canvas_h))

        self.state_manager = StateManager(canvas_w, canvas_h, scene=config.scene)
        self.scene_clock = SceneClock()
        self.loop = AnimationLoop(self.state_manager, self.scene_clock, config.fps,
                                  log_frames=config.log_frames,
                                  start_ms=pygame.time.get_ticks())
        self.fetcher = WeatherFetcher(
            self.state_manager,
            timeout=config.request_timeout_s,
            default_location=GeoLocation(name="Default", latitude=config.default_lat,
                                         longitude=config.default_lon),
        )
        self.hud = Hud(self.state_manager, self.scene_clock, on_search=self.fetcher.search)

        self.running = True
        print(f"\n{TITLE}")
        print("=" * 60)
        print(f"Canvas {canvas_w}x{canvas_h} @ {config.fps:g} fps "
              f"(window {config.width}x{config.height}, scale {config.pixel_scale})")
        print("=" * 60)

    def start_weather(self):
        """First fetch: CLI city, CLI coordinates, or wherever we are."""
        if self.config.city:
            self.fetcher.search(self.config.city)
        elif self.config.latitude is not None:
            self.fetcher.fetch_location(GeoLocation(
                name=f"{self.config.latitude:.2f}, {self.config.longitude:.2f}",
                latitude=self.config.latitude, longitude=self.config.longitude))
        else:
            self.fetcher.locate_and_fetch()

    def run(self):
        """Host repaint loop"""
        self.start_weather()

        while self.running:
            dt = self.host_clock.tick(self.config.refresh_hz) / 1000.0

            for event in pygame.event.get():
                self.handle_event(event)

            self.hud.update(dt)

            # Only accepted frames redraw the canvas; the window is still
            # refreshed every tick so the HUD stays responsive.
            self.loop.request_frame(self.canvas, pygame.time.get_ticks())
            pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
            self.hud.draw(self.screen, self.loop.last_theme)
            pygame.display.flip()

        self.quit()

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
            return

        if event.type == pygame.VIDEORESIZE:
            self.handle_resize(event.w, event.h)
            return

        if self.hud.handle_event(event) or self.hud.captures_keys:
            return

        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key == pygame.K_F11:
            self.toggle_fullscreen()
        elif event.key in SCENE_KEYS:
            self.state_manager.switch_scene(SCENE_KEYS[event.key])
        elif event.key == pygame.K_TAB:
            self.state_manager.switch_scene(
                next_scene_kind(self.state_manager.current_scene_kind))
        elif event.key == pygame.K_m:
            self.hud.toggle_search()
        elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.scene_clock.speed_up()
        elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.scene_clock.speed_down()
        elif event.key == pygame.K_r:
            self.scene_clock.realtime()
        elif event.key == pygame.K_LEFTBRACKET:
            self.scene_clock.jump(-HOUR_S)
        elif event.key == pygame.K_RIGHTBRACKET:
            self.scene_clock.jump(HOUR_S)

    def toggle_fullscreen(self):
        """Toggle between fullscreen and windowed mode"""
        self.fullscreen = not self.fullscreen

        if self.fullscreen:
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
            print(f"Switched to fullscreen: {width}x{height}")
        else:
            width, height = self.config.width, self.config.height
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            print(f"Switched to windowed: {width}x{height}")
        self._rebuild_canvas(width, height)

    def handle_resize(self, width: int, height: int):
        """Handle window resize event"""
        if not self.fullscreen:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            print(f"Window resized to: {width}x{height}")
            self._rebuild_canvas(width, height)

    def _rebuild_canvas(self, width: int, height: int):
        scale = self.config.pixel_scale
        canvas_w, canvas_h = max(1, width // scale), max(1, height // scale)
        self.canvas = pygame.Surface((canvas_w, canvas_h))
        self.state_manager.resize(canvas_w, canvas_h)

    def quit(self):
        """Cleanup and quit"""
        print("\nShutting down...")
        pygame.quit()
        sys.exit(0)


def main(argv: Optional[Sequence[str]] = None):
    """Entry point"""
    try:
        config = DioramaConfig.from_args(argv)
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(2)

    try:
        app = DioramaApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception as e:
        print(f"\n\nFATAL ERROR: {e}")
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
