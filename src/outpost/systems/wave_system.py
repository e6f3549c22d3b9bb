"""Wave progression state machine and timed enemy spawning."""

from __future__ import annotations

import random

from loguru import logger

from outpost.config import EnemyScaling, WaveRules
from outpost.core.event_bus import EventBus
from outpost.core.game_state import Outcome, WaveState
from outpost.core.session import SessionState
from outpost.core.timer import IntervalTimer
from outpost.entities.enemy import create_enemy
from outpost.systems.pathing import Path


class WaveController:
    """Introduces each wave's enemies one timer tick at a time.

    Holds a non-owning reference to the current session; ``reset`` rebinds
    it when the game restarts.
    """

    def __init__(
        self,
        session: SessionState,
        rules: WaveRules,
        scaling: EnemyScaling,
        path: Path,
        timer: IntervalTimer,
        events: EventBus,
        rng: random.Random | None = None,
    ) -> None:
        self._session = session
        self._rules = rules
        self._scaling = scaling
        self._path = path
        self._timer = timer
        self._events = events
        self._rng = rng or random.Random()
        self.state = WaveState.IDLE
        self.enemies_to_spawn = 0
        self.spawned = 0

    @property
    def timer(self) -> IntervalTimer:
        return self._timer

    def next_wave(self) -> None:
        session = self._session
        if self.state == WaveState.SPAWNING:
            raise RuntimeError("Wave already spawning")
        if self.state == WaveState.WON:
            return

        if session.wave >= session.wave_count:
            self.state = WaveState.WON
            session.finish(Outcome.WIN)
            logger.info(f"All {session.wave_count} waves cleared")
            self._events.emit("game_over", outcome=Outcome.WIN.value, wave=session.wave)
            return

        session.wave += 1
        session.spawning = True
        self.state = WaveState.SPAWNING
        self.enemies_to_spawn = self._rules.enemies_for(session.wave)
        self.spawned = 0
        interval = self._rules.interval_for(session.wave)

        logger.info(
            f"Wave {session.wave}/{session.wave_count} started: "
            f"{self.enemies_to_spawn} enemies every {interval:.0f}ms"
        )
        self._events.emit(
            "wave_start",
            wave=session.wave,
            total_waves=session.wave_count,
            planned_enemies=self.enemies_to_spawn,
            interval_ms=interval,
        )
        self._timer.start(interval, self.spawn_one, self._on_spawning_complete)

    def spawn_one(self) -> None:
        if self.state != WaveState.SPAWNING:
            return

        session = self._session
        enemy = create_enemy(session.next_enemy_id(), session.wave, self._path, self._scaling, self._rng)
        session.add_enemy(enemy)
        self.spawned += 1
        self._events.emit(
            "enemy_spawned",
            enemy_id=enemy.enemy_id,
            wave=session.wave,
            hp=enemy.max_hp,
            reward=enemy.reward,
        )

        if self.spawned >= self.enemies_to_spawn:
            self._timer.cancel()

    def halt(self) -> None:
        """Stop spawning without finishing the wave (loss or restart)."""
        self._timer.cancel()
        self._session.spawning = False
        if self.state == WaveState.SPAWNING:
            self.state = WaveState.IDLE

    def reset(self, session: SessionState) -> None:
        self.halt()
        self._session = session
        self.state = WaveState.IDLE
        self.enemies_to_spawn = 0
        self.spawned = 0

    def enemies_remaining_to_spawn(self) -> int:
        if self.state != WaveState.SPAWNING:
            return 0
        return self.enemies_to_spawn - self.spawned

    def _on_spawning_complete(self) -> None:
        session = self._session
        session.spawning = False
        if self.state == WaveState.SPAWNING and self.spawned >= self.enemies_to_spawn:
            logger.debug(f"Wave {session.wave} finished spawning {self.spawned} enemies")
            self._events.emit("wave_spawn_complete", wave=session.wave, spawned=self.spawned)
        self.state = WaveState.IDLE
