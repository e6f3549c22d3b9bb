"""Main simulation orchestrator for the Outpost tower-defense core."""

from __future__ import annotations

from pathlib import Path as FilePath
import random

from loguru import logger

from outpost.config import GameContent, load_game_content
from outpost.core.event_bus import EventBus
from outpost.core.game_state import Outcome
from outpost.core.session import SessionState, new_session
from outpost.core.timer import IntervalTimer
from outpost.entities.enemy import Enemy
from outpost.entities.tower import Tower
from outpost.systems.combat_system import CombatSystem
from outpost.systems.pathing import Path
from outpost.systems.placement_system import PlacementSystem
from outpost.systems.wave_system import WaveController


OUTCOME_MESSAGES = {
    Outcome.WIN: ("You Win!", "All waves defeated. Great defense!"),
    Outcome.LOSS: ("Game Over", "Your base was overrun. Try a new strategy."),
}


class OutpostGame:
    """Engine-agnostic tower-defense simulation.

    The driver calls ``advance`` once per frame and feeds elapsed time to
    ``spawn_timer``; renderers and HUDs only read ``session``.
    """

    def __init__(
        self,
        data_dir: FilePath | None = None,
        content: GameContent | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.content = content or load_game_content(base_data_dir=data_dir)
        self.events = EventBus()

        map_cfg = self.content.map_config
        self.path = Path(map_cfg.path_waypoints)
        self.field = map_cfg.field
        self.placement = PlacementSystem(
            path=self.path,
            tower_stats=self.content.tower_stats,
            path_clearance=map_cfg.path_clearance,
            tower_clearance=map_cfg.tower_clearance,
        )
        self.combat = CombatSystem(self.content.tower_stats, field_width=map_cfg.field.width)

        self.session: SessionState = new_session(self.content)
        self.wave_controller = WaveController(
            session=self.session,
            rules=self.content.wave_rules,
            scaling=self.content.enemy_scaling,
            path=self.path,
            timer=IntervalTimer(),
            events=self.events,
            rng=rng,
        )

    @property
    def spawn_timer(self) -> IntervalTimer:
        return self.wave_controller.timer

    def restart(self) -> None:
        self.session = new_session(self.content)
        self.wave_controller.reset(self.session)
        logger.info("Session restarted")
        self.events.emit("restart", gold=self.session.gold, lives=self.session.lives)
        self.wave_controller.next_wave()

    def place_tower(self, x: float, y: float) -> Tower | None:
        tower = self.placement.place_tower(self.session, x, y)
        if tower is None:
            return None
        self.events.emit(
            "tower_built",
            tower_id=tower.tower_id,
            tower_type=self.content.tower_stats.tower_type,
            x=tower.x,
            y=tower.y,
            cost=self.content.tower_stats.cost,
            gold=self.session.gold,
        )
        return tower

    def advance(self) -> None:
        session = self.session
        if session.game_over:
            return

        for enemy in session.enemies.values():
            if enemy.move(self.path):
                session.lives -= 1
                self.events.emit("enemy_leaked", enemy_id=enemy.enemy_id, lives=session.lives)

        combat_outcome = self.combat.tick(session)
        for projectile in combat_outcome.fired:
            self.events.emit(
                "projectile_fired",
                projectile_id=projectile.projectile_id,
                target_id=projectile.target_id,
            )
        for projectile, target in combat_outcome.hits:
            self.events.emit(
                "projectile_hit",
                projectile_id=projectile.projectile_id,
                target_id=target.enemy_id,
                damage=projectile.damage,
                hp=target.hp,
            )

        self._cleanup()

        if session.lives <= 0:
            session.finish(Outcome.LOSS)
            self.wave_controller.halt()
            logger.info(f"Base overrun on wave {session.wave}/{session.wave_count}")
            self.events.emit("game_over", outcome=Outcome.LOSS.value, wave=session.wave)

        if not session.spawning and not session.enemies and not session.game_over:
            self.wave_controller.next_wave()

    def _cleanup(self) -> None:
        session = self.session
        session.projectiles = [
            p for p in session.projectiles if not p.hit and p.target_id in session.enemies
        ]

        survivors: dict[str, Enemy] = {}
        for enemy_id, enemy in session.enemies.items():
            if enemy.reached_end:
                continue
            if enemy.is_defeated:
                bounty = session.economy.pay_bounty(session.wave)
                self.events.emit("enemy_defeated", enemy_id=enemy_id, bounty=bounty, gold=session.gold)
                continue
            survivors[enemy_id] = enemy
        session.enemies = survivors

    def outcome_message(self) -> tuple[str, str] | None:
        if self.session.outcome is None:
            return None
        return OUTCOME_MESSAGES[self.session.outcome]

    def snapshot(self) -> dict[str, int | str | bool | None]:
        session = self.session
        return {
            "gold": session.gold,
            "lives": session.lives,
            "wave": session.wave,
            "total_waves": session.wave_count,
            "wave_label": f"{session.wave}/{session.wave_count}",
            "enemies": len(session.enemies),
            "enemies_to_spawn": self.wave_controller.enemies_remaining_to_spawn(),
            "towers": len(session.towers),
            "tower_name": self.content.tower_stats.display_name,
            "tower_cost": self.content.tower_stats.cost,
            "projectiles": len(session.projectiles),
            "wave_state": self.wave_controller.state.value,
            "game_over": session.game_over,
            "outcome": session.outcome.value if session.outcome else None,
        }
