from outpost.systems.economy_system import EconomySystem


def test_tower_purchase_spends_cost() -> None:
    economy = EconomySystem(gold=150, tower_cost=50, defeat_bonus=8)
    assert economy.can_afford_tower()
    assert economy.buy_tower()
    assert economy.gold == 100


def test_purchase_without_gold_leaves_balance() -> None:
    economy = EconomySystem(gold=40, tower_cost=50, defeat_bonus=8)
    assert not economy.can_afford_tower()
    assert not economy.buy_tower()
    assert economy.gold == 40


def test_bounty_scales_with_current_wave() -> None:
    economy = EconomySystem(gold=0, tower_cost=50, defeat_bonus=8)
    assert economy.pay_bounty(1) == 9
    assert economy.pay_bounty(5) == 13
    assert economy.gold == 22
