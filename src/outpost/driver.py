"""Frame driver and input mapping around the simulation core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from outpost.config import FieldConfig
from outpost.core.event_bus import Event
from outpost.core.session import SessionState
from outpost.entities.tower import Tower
from outpost.game import OutpostGame


@dataclass
class ScreenRect:
    """On-screen rectangle the field is displayed in."""

    left: float
    top: float
    width: float
    height: float


def screen_to_field(client_x: float, client_y: float, rect: ScreenRect, field: FieldConfig) -> tuple[float, float]:
    x = (client_x - rect.left) / rect.width * field.width
    y = (client_y - rect.top) / rect.height * field.height
    return (x, y)


Renderer = Callable[[SessionState], None]
Hud = Callable[[dict], None]
Overlay = Callable[[str, str], None]


class GameDriver:
    """Owns the frame cadence: spawn timer, one ``advance``, then reads."""

    def __init__(
        self,
        game: OutpostGame,
        frame_ms: float = 1000.0 / 60.0,
        renderer: Renderer | None = None,
        hud: Hud | None = None,
        overlay: Overlay | None = None,
    ) -> None:
        self.game = game
        self.frame_ms = frame_ms
        self.renderer = renderer
        self.hud = hud
        self.overlay = overlay
        self.frames = 0
        game.events.subscribe("game_over", self._show_outcome)

    def run_frame(self) -> None:
        self.game.spawn_timer.advance(self.frame_ms)
        self.game.advance()
        self.frames += 1
        self.sync_hud()
        if self.renderer is not None:
            self.renderer(self.game.session)

    def restart(self) -> None:
        self.game.restart()
        self.sync_hud()

    def sync_hud(self) -> None:
        if self.hud is not None:
            self.hud(self.game.snapshot())

    def click(self, client_x: float, client_y: float, rect: ScreenRect) -> Tower | None:
        x, y = screen_to_field(client_x, client_y, rect, self.game.field)
        tower = self.game.place_tower(x, y)
        self.sync_hud()
        return tower

    def run(self, max_frames: int) -> int:
        """Run frames until the session ends or ``max_frames`` is hit."""
        start = self.frames
        while not self.game.session.game_over and self.frames - start < max_frames:
            self.run_frame()
        return self.frames - start

    def _show_outcome(self, event: Event) -> None:
        message = self.game.outcome_message()
        if self.overlay is not None and message is not None:
            self.overlay(*message)
