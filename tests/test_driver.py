import random

from outpost.config import FieldConfig
from outpost.core.game_state import Outcome
from outpost.driver import GameDriver, ScreenRect, screen_to_field
from outpost.game import OutpostGame


def test_screen_coordinates_map_to_field() -> None:
    rect = ScreenRect(left=10, top=20, width=480, height=270)
    field = FieldConfig(width=960, height=540)
    assert screen_to_field(250, 155, rect, field) == (480.0, 270.0)


def test_click_places_tower_and_syncs_hud() -> None:
    game = OutpostGame()
    hud_updates = []
    driver = GameDriver(game, hud=hud_updates.append)
    rect = ScreenRect(left=0, top=0, width=480, height=270)

    assert driver.click(150, 85, rect) is not None
    assert driver.click(120, 55, rect) is None
    assert game.session.gold == 100
    assert [update["gold"] for update in hud_updates] == [100, 100]


def test_undefended_run_ends_in_loss() -> None:
    game = OutpostGame(rng=random.Random(9))
    frames_seen = []
    hud_updates = []
    overlays = []
    driver = GameDriver(
        game,
        renderer=frames_seen.append,
        hud=hud_updates.append,
        overlay=lambda title, text: overlays.append(title),
    )
    driver.restart()
    assert hud_updates[0]["wave_label"] == "1/8"

    driver.run(max_frames=50_000)

    assert game.session.outcome == Outcome.LOSS
    assert game.session.lives <= 0
    assert not game.session.win
    assert frames_seen[-1] is game.session
    assert hud_updates[-1]["game_over"] is True
    assert hud_updates[-1]["wave_label"].endswith("/8")
    assert overlays == ["Game Over"]


def test_event_bus_notifies_subscribers() -> None:
    game = OutpostGame()
    seen = []
    game.events.subscribe("wave_start", lambda event: seen.append(event.payload["wave"]))

    game.advance()

    assert seen == [1]
    assert [event.name for event in game.events.drain()] == ["wave_start"]
    assert game.events.events == []
