"""State definitions for wave flow and session outcome."""

from enum import Enum


class WaveState(str, Enum):
    IDLE = "idle"
    SPAWNING = "spawning"
    WON = "won"


class Outcome(str, Enum):
    WIN = "win"
    LOSS = "loss"
