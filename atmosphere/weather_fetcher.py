"""
WeatherFetcher — runs provider calls off the render thread.

Each request (search, coordinate fetch, start-up location) gets a number from
a monotonically increasing counter. When a worker finishes it only publishes
if its number is still the latest one, so a slow response from an older
search can never overwrite a newer one.

Usage:
    fetcher = WeatherFetcher(state_manager)
    fetcher.locate_and_fetch()        # start-up
    fetcher.search("Lisbon")          # from the search box
"""

from __future__ import annotations
import threading
from typing import Callable, Optional, TYPE_CHECKING

from . import open_meteo
from .open_meteo import GeoLocation, LocationNotFoundError, WeatherServiceError

if TYPE_CHECKING:
    from game.state_manager import StateManager


DEFAULT_LOCATION = GeoLocation(name="London", country="United Kingdom",
                               latitude=51.5, longitude=0.0)


class WeatherFetcher:
    """
    Fire-and-forget fetches with last-request-wins publishing.

    Args:
        state_manager: owner of the shared WeatherState (write side)
        timeout: per-request timeout in seconds
        default_location: used when the machine cannot be located
        run_async: False runs workers inline (tests, scripted use)
    """

    def __init__(self, state_manager: 'StateManager',
                 timeout: float = open_meteo.DEFAULT_TIMEOUT_S,
                 default_location: GeoLocation = DEFAULT_LOCATION,
                 run_async: bool = True):
        self._state_manager = state_manager
        self.timeout = timeout
        self.default_location = default_location
        self.run_async = run_async
        self._lock = threading.Lock()
        self._latest_id = 0

    # ── Requests ─────────────────────────────────────────────────────────────

    def search(self, name: str) -> int:
        """Geocode a place name, then fetch its weather."""
        request_id = self._next_id()
        self._state_manager.set_status("Searching...")
        self._start(self._search_worker, request_id, name)
        return request_id

    def fetch_location(self, location: GeoLocation) -> int:
        request_id = self._next_id()
        self._start(self._weather_worker, request_id, location)
        return request_id

    def locate_and_fetch(self) -> int:
        """Start-up path: IP location, or the default coordinate."""
        request_id = self._next_id()
        self._start(self._locate_worker, request_id)
        return request_id

    def is_current(self, request_id: int) -> bool:
        with self._lock:
            return request_id == self._latest_id

    # ── Workers ──────────────────────────────────────────────────────────────

    def _search_worker(self, request_id: int, name: str) -> None:
        try:
            location = open_meteo.search_city(name, timeout=self.timeout)
        except LocationNotFoundError as e:
            print(f"Search failed: {e}")
            self._report(request_id, "Not found", is_error=True)
            return
        except WeatherServiceError as e:
            print(f"Search error: {e}")
            self._report(request_id, "Error", is_error=True)
            return

        self._report(request_id, f"Success: {location.name}")
        self._weather_worker(request_id, location)

    def _locate_worker(self, request_id: int) -> None:
        try:
            location = open_meteo.locate_by_ip(timeout=self.timeout)
        except WeatherServiceError as e:
            location = self.default_location
            print(f"Location unavailable ({e}), using {location.display_name}")
        self._weather_worker(request_id, location)

    def _weather_worker(self, request_id: int, location: GeoLocation) -> None:
        try:
            state = open_meteo.fetch_weather(location.latitude, location.longitude,
                                             timeout=self.timeout)
        except WeatherServiceError as e:
            print(f"Weather fetch error: {e}")
            self._report(request_id, "Error", is_error=True)
            return

        # check and publish under one hold: a newer request cannot slip in between
        with self._lock:
            if request_id == self._latest_id:
                self._state_manager.publish_weather(state, location)
                return
        print(f"Dropped stale weather for {location.display_name}")

    # ── Helpers ──────────────────────────────────────────────────────────────

    def _next_id(self) -> int:
        with self._lock:
            self._latest_id += 1
            return self._latest_id

    def _report(self, request_id: int, text: str, is_error: bool = False) -> None:
        with self._lock:
            if request_id == self._latest_id:
                self._state_manager.set_status(text, is_error)

    def _start(self, target: Callable, *args) -> Optional[threading.Thread]:
        if not self.run_async:
            target(*args)
            return None
        thread = threading.Thread(target=target, args=args, daemon=True)
        thread.start()
        return thread
