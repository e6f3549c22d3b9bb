import random

from outpost.core.game_state import Outcome
from outpost.entities.enemy import Enemy
from outpost.entities.projectile import Projectile
from outpost.entities.tower import create_tower
from outpost.game import OutpostGame


def _enemy(enemy_id: str, x: float, y: float, waypoint: int, hp: float = 50, speed: float = 0.0) -> Enemy:
    return Enemy(enemy_id=enemy_id, x=x, y=y, speed=speed, max_hp=hp, hp=hp, reward=11, waypoint=waypoint)


def test_defeated_enemy_pays_bounty_for_current_wave() -> None:
    game = OutpostGame()
    session = game.session
    session.wave = 3
    session.towers.append(create_tower("tower_001", 100, 0, game.content.tower_stats))
    session.add_enemy(_enemy("e1", 100, 10, waypoint=1, hp=10))

    game.advance()

    assert "e1" not in session.enemies
    assert session.gold == 150 + 8 + 3
    assert session.projectiles == []
    assert len(game.events.named("enemy_defeated")) == 1


def test_enemy_reaching_end_costs_one_life_and_no_gold() -> None:
    game = OutpostGame()
    session = game.session
    session.wave = 1
    session.add_enemy(_enemy("e1", 948, 160, waypoint=7, speed=3.0))

    game.advance()
    assert (session.enemies["e1"].x, session.enemies["e1"].y) == (950, 160)
    assert session.lives == 20

    game.advance()
    assert "e1" not in session.enemies
    assert session.lives == 19
    assert session.gold == 150
    assert len(game.events.named("enemy_leaked")) == 1


def test_losing_last_life_ends_session_and_stops_spawning() -> None:
    game = OutpostGame()
    game.advance()
    session = game.session
    assert session.spawning

    session.lives = 1
    session.add_enemy(_enemy("e1", 950, 160, waypoint=8))
    game.advance()

    assert session.game_over
    assert not session.win
    assert session.outcome == Outcome.LOSS
    assert not session.spawning
    assert not game.spawn_timer.active
    assert game.outcome_message()[0] == "Game Over"

    game.spawn_timer.advance(10_000)
    game.advance()
    assert session.lives == 0
    assert session.wave == 1


def test_restart_reinitialises_session() -> None:
    game = OutpostGame(rng=random.Random(5))
    game.place_tower(300, 170)
    game.advance()
    game.spawn_timer.advance(1200)
    old_session = game.session

    game.restart()

    assert game.session is not old_session
    assert (game.session.gold, game.session.lives, game.session.wave) == (150, 20, 1)
    assert game.session.towers == []
    assert game.session.enemies == {}
    assert game.session.spawning
    game.spawn_timer.advance(520)
    assert len(game.session.enemies) == 1
    assert old_session.enemies.keys() == {"enemy_0001", "enemy_0002"}


def test_simulation_invariants_hold_over_a_session() -> None:
    game = OutpostGame(rng=random.Random(42))
    game.restart()
    for x, y in [(300, 170), (460, 300), (730, 300)]:
        game.place_tower(x, y)

    last_lives = game.session.lives
    last_wave = game.session.wave
    for _ in range(6000):
        game.spawn_timer.advance(1000 / 60)
        game.advance()
        session = game.session
        assert session.lives <= last_lives
        assert session.wave >= last_wave
        assert session.gold >= 0
        for enemy in session.enemies.values():
            assert 0 < enemy.hp <= enemy.max_hp
            assert not enemy.reached_end
        assert not session.win or session.game_over
        last_lives = session.lives
        last_wave = session.wave
        if session.game_over:
            break

    assert game.session.wave >= 2
    assert game.events.named("projectile_fired")


def test_projectile_for_removed_enemy_is_dropped() -> None:
    game = OutpostGame()
    session = game.session
    session.projectiles.append(Projectile(projectile_id="p1", x=10, y=10, target_id="gone", speed=5.2, damage=16))

    game.advance()

    assert session.projectiles == []


def test_second_shot_is_dropped_after_first_kills_target() -> None:
    game = OutpostGame()
    session = game.session
    session.wave = 1
    stats = game.content.tower_stats
    session.towers.append(create_tower("tower_001", 100, 0, stats))
    session.towers.append(create_tower("tower_002", 100, -60, stats))
    session.add_enemy(_enemy("e1", 100, 10, waypoint=1, hp=10))

    game.advance()

    assert "e1" not in session.enemies
    assert len(game.events.named("projectile_fired")) == 2
    (hit,) = game.events.named("projectile_hit")
    assert hit.payload["target_id"] == "e1"
    assert hit.payload["hp"] == 0
    assert [p.target_id for p in session.projectiles] == ["e1"]
    trailing_position = session.projectiles[0].position

    game.advance()

    assert session.projectiles == []
    assert len(game.events.named("projectile_hit")) == 1
    assert round(trailing_position[1], 1) == -54.8
