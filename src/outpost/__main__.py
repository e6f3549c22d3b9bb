"""CLI entry point for a headless Outpost run."""

from __future__ import annotations

import random

from outpost.driver import GameDriver
from outpost.game import OutpostGame


def _auto_build(game: OutpostGame, driver: GameDriver) -> None:
    # Fixed build order beside the first bends; later spots wait for gold.
    planned_sites = [
        (300, 170),
        (180, 170),
        (460, 300),
        (600, 310),
        (730, 300),
        (850, 250),
        (380, 170),
        (700, 220),
    ]

    for x, y in planned_sites:
        if any((tower.x, tower.y) == (x, y) for tower in game.session.towers):
            continue
        if game.session.gold < game.content.tower_stats.cost:
            break
        game.place_tower(x, y)
    driver.sync_hud()


def main() -> None:
    game = OutpostGame(rng=random.Random(7))
    driver = GameDriver(game)
    driver.restart()

    while not game.session.game_over:
        _auto_build(game, driver)
        driver.run(max_frames=600)
        game.events.drain()

    summary = game.snapshot()
    title, text = game.outcome_message()
    print("Outpost Headless Run")
    print(f"{title} {text}")
    print(f"outcome={summary['outcome']}")
    print(f"gold={summary['gold']}")
    print(f"lives={summary['lives']}")
    print(f"waves={summary['wave_label']}")
    print(f"towers_built={summary['towers']}")
    print(f"frames={driver.frames}")


if __name__ == "__main__":
    main()
