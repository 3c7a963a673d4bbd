"""
TimeController — orologio della scena e limitatore di frame.

SceneClock
    Istante UTC usato dal resolver del tema. Di default segue il tempo reale;
    con il "time warp" si può far scorrere la giornata più velocemente per
    vedere alba, tramonto e notte senza aspettare.

    SPEEDS = [1, 60, 600, 3600]
    (tempo reale, 1min/s, 10min/s, 1h/s)

    clock.speed_up()    — prossimo step di velocità
    clock.speed_down()  — step indietro (minimo: tempo reale)
    clock.realtime()    — torna a tempo reale, sincronizza con clock di sistema
    clock.now_utc()     — istante corrente della scena

FrameThrottle
    Il callback di repaint dell'host arriva al refresh del display (~60 Hz),
    che NON è il frame rate del diorama. ready(now_ms) accetta un frame solo
    quando è passato più di 1000/fps ms dall'ultimo frame accettato, e
    riallinea l'ancora togliendo il resto modulo l'intervallo, così gli
    arrotondamenti non si accumulano nel tempo.
"""

from __future__ import annotations
import time
from datetime import datetime, timezone, timedelta
from typing import Callable, Optional


# Passi di velocità in secondi di scena per secondo reale
SPEEDS = [1, 60, 600, 3600]
SPEED_LABELS = ["1×", "1min/s", "10min/s", "1h/s"]


class SceneClock:
    """
    Orologio della scena con time warp.

    Parametri
    ----------
    start_utc : datetime UTC da cui partire (default: adesso)
    speed_idx : indice in SPEEDS (default: 0 = tempo reale)
    wall      : sorgente di secondi monotoni (iniettabile nei test)
    """

    def __init__(self,
                 start_utc: Optional[datetime] = None,
                 speed_idx: int = 0,
                 wall: Callable[[], float] = time.monotonic):
        if start_utc is None:
            start_utc = datetime.now(timezone.utc)
        self._wall = wall
        self._anchor_utc = start_utc
        self._anchor_wall = wall()
        self._speed_idx = max(0, min(speed_idx, len(SPEEDS) - 1))

    # ── Proprietà ────────────────────────────────────────────────────────────

    @property
    def speed(self) -> int:
        return SPEEDS[self._speed_idx]

    @property
    def speed_label(self) -> str:
        return SPEED_LABELS[self._speed_idx]

    @property
    def is_realtime(self) -> bool:
        return self._speed_idx == 0

    def now_utc(self) -> datetime:
        elapsed = (self._wall() - self._anchor_wall) * self.speed
        return self._anchor_utc + timedelta(seconds=elapsed)

    # ── Controlli ────────────────────────────────────────────────────────────

    def speed_up(self):
        if self._speed_idx < len(SPEEDS) - 1:
            self._rebase()
            self._speed_idx += 1

    def speed_down(self):
        if self._speed_idx > 0:
            self._rebase()
            self._speed_idx -= 1

    def realtime(self):
        """Torna a tempo reale e sincronizza con l'orologio di sistema."""
        self._anchor_utc = datetime.now(timezone.utc)
        self._anchor_wall = self._wall()
        self._speed_idx = 0

    def jump(self, delta_seconds: float):
        """Salta di delta_seconds (può essere negativo)."""
        self._anchor_utc += timedelta(seconds=delta_seconds)

    def _rebase(self):
        # Fissa l'istante corrente prima di cambiare velocità
        self._anchor_utc = self.now_utc()
        self._anchor_wall = self._wall()


class FrameThrottle:
    """
    Limita il repaint dell'host al frame rate desiderato.

    Stati logici: idle tra un frame e l'altro / rendering di un frame.
    ready() ritorna True esattamente quando si passa al secondo.
    """

    def __init__(self, fps: float, start_ms: float = 0.0):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = float(fps)
        self.interval_ms = 1000.0 / self.fps
        self._then = float(start_ms)
        self.frames = 0

    def ready(self, now_ms: float) -> bool:
        elapsed = now_ms - self._then
        if elapsed <= self.interval_ms:
            return False
        # Correzione del drift: l'ancora avanza di elapsed meno il resto
        self._then = now_ms - (elapsed % self.interval_ms)
        self.frames += 1
        return True

    def reset(self, now_ms: float):
        self._then = float(now_ms)
