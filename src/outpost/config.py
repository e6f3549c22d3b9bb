"""Config loading and validation for the Outpost simulation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import json

from loguru import logger


@dataclass
class Waypoint:
    x: float
    y: float


@dataclass
class FieldConfig:
    width: float
    height: float


@dataclass
class MapConfig:
    map_id: str
    field: FieldConfig
    starting_gold: int
    starting_lives: int
    path_clearance: float
    tower_clearance: float
    path_waypoints: list[Waypoint]


@dataclass
class TowerStats:
    tower_type: str
    display_name: str
    cost: int
    range: float
    fire_rate: int
    damage: float
    projectile_speed: float


@dataclass
class EnemyScaling:
    speed_base: float
    speed_per_wave: float
    speed_jitter: float
    hp_base: float
    hp_per_wave: float
    reward_base: int
    radius: float

    def speed_for(self, wave: int, jitter_roll: float) -> float:
        return self.speed_base + wave * self.speed_per_wave + jitter_roll * self.speed_jitter

    def hp_for(self, wave: int) -> float:
        return self.hp_base + wave * self.hp_per_wave

    def reward_for(self, wave: int) -> int:
        return self.reward_base + wave


@dataclass
class WaveRules:
    total_waves: int
    base_count: int
    count_per_wave: int
    interval_base_ms: float
    interval_step_ms: float
    interval_floor_ms: float
    defeat_bonus: int

    def enemies_for(self, wave: int) -> int:
        return self.base_count + wave * self.count_per_wave

    def interval_for(self, wave: int) -> float:
        # Later waves spawn faster, down to the floor.
        return max(self.interval_floor_ms, self.interval_base_ms - wave * self.interval_step_ms)


@dataclass
class GameContent:
    map_config: MapConfig
    tower_stats: TowerStats
    enemy_scaling: EnemyScaling
    wave_rules: WaveRules


DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


def _load_json(path: Path) -> dict | list:
    if not path.exists():
        raise ValueError(f"Missing config file: {path}")
    return json.loads(path.read_text())


def _require_keys(data: dict, keys: set[str], context: str) -> None:
    missing = keys - set(data.keys())
    if missing:
        raise ValueError(f"{context}: missing keys {sorted(missing)}")


def load_game_content(base_data_dir: Path | None = None) -> GameContent:
    data_dir = base_data_dir or DEFAULT_DATA_DIR

    map_raw = _load_json(data_dir / "maps" / "map_01_switchback.json")
    _require_keys(
        map_raw,
        {
            "map_id",
            "field",
            "starting_gold",
            "starting_lives",
            "path_clearance",
            "tower_clearance",
            "path_waypoints",
        },
        "map_01_switchback",
    )
    _require_keys(map_raw["field"], {"width", "height"}, "map_01_switchback field")

    map_config = MapConfig(
        map_id=map_raw["map_id"],
        field=FieldConfig(
            width=float(map_raw["field"]["width"]),
            height=float(map_raw["field"]["height"]),
        ),
        starting_gold=int(map_raw["starting_gold"]),
        starting_lives=int(map_raw["starting_lives"]),
        path_clearance=float(map_raw["path_clearance"]),
        tower_clearance=float(map_raw["tower_clearance"]),
        path_waypoints=[Waypoint(x=float(p["x"]), y=float(p["y"])) for p in map_raw["path_waypoints"]],
    )

    if map_config.starting_gold < 0:
        raise ValueError("starting_gold must be non-negative")
    if len(map_config.path_waypoints) < 2:
        raise ValueError("path_waypoints must include at least 2 points")
    if map_config.field.width <= 0:
        raise ValueError("field width must be positive")

    tower_raw = _load_json(data_dir / "towers" / "towers.json")
    _require_keys(tower_raw, {"tower_type", "display_name", "cost", "stats"}, "tower")
    stats = tower_raw["stats"]
    _require_keys(stats, {"range", "fire_rate", "damage", "projectile_speed"}, "tower stats")
    tower_stats = TowerStats(
        tower_type=tower_raw["tower_type"],
        display_name=tower_raw["display_name"],
        cost=int(tower_raw["cost"]),
        range=float(stats["range"]),
        fire_rate=int(stats["fire_rate"]),
        damage=float(stats["damage"]),
        projectile_speed=float(stats["projectile_speed"]),
    )

    scaling_raw = _load_json(data_dir / "enemies" / "enemy_scaling.json")
    _require_keys(
        scaling_raw,
        {"speed_base", "speed_per_wave", "speed_jitter", "hp_base", "hp_per_wave", "reward_base", "radius"},
        "enemy_scaling",
    )
    enemy_scaling = EnemyScaling(
        speed_base=float(scaling_raw["speed_base"]),
        speed_per_wave=float(scaling_raw["speed_per_wave"]),
        speed_jitter=float(scaling_raw["speed_jitter"]),
        hp_base=float(scaling_raw["hp_base"]),
        hp_per_wave=float(scaling_raw["hp_per_wave"]),
        reward_base=int(scaling_raw["reward_base"]),
        radius=float(scaling_raw["radius"]),
    )

    waves_raw = _load_json(data_dir / "waves" / "waves.json")
    _require_keys(
        waves_raw,
        {
            "total_waves",
            "base_count",
            "count_per_wave",
            "interval_base_ms",
            "interval_step_ms",
            "interval_floor_ms",
            "defeat_bonus",
        },
        "waves",
    )
    wave_rules = WaveRules(
        total_waves=int(waves_raw["total_waves"]),
        base_count=int(waves_raw["base_count"]),
        count_per_wave=int(waves_raw["count_per_wave"]),
        interval_base_ms=float(waves_raw["interval_base_ms"]),
        interval_step_ms=float(waves_raw["interval_step_ms"]),
        interval_floor_ms=float(waves_raw["interval_floor_ms"]),
        defeat_bonus=int(waves_raw["defeat_bonus"]),
    )
    if wave_rules.total_waves <= 0:
        raise ValueError("total_waves must be positive")
    if wave_rules.interval_floor_ms <= 0:
        raise ValueError("interval_floor_ms must be positive")

    logger.debug(
        f"Content loaded: {map_config.map_id}, {len(map_config.path_waypoints)} waypoints, "
        f"{wave_rules.total_waves} waves"
    )

    return GameContent(
        map_config=map_config,
        tower_stats=tower_stats,
        enemy_scaling=enemy_scaling,
        wave_rules=wave_rules,
    )
