"""Gold economy: tower purchases and defeat bounties."""

from dataclasses import dataclass


@dataclass
class EconomySystem:
    gold: int
    tower_cost: int
    defeat_bonus: int

    def can_afford_tower(self) -> bool:
        return self.gold >= self.tower_cost

    def buy_tower(self) -> bool:
        if self.gold < self.tower_cost:
            return False
        self.gold -= self.tower_cost
        return True

    def pay_bounty(self, wave: int) -> int:
        """Credit one defeat; the bounty tracks the wave being played now."""
        bounty = self.defeat_bonus + wave
        if bounty < 0:
            raise ValueError("bounty must be non-negative")
        self.gold += bounty
        return bounty
