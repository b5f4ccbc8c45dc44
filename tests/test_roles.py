import pytest

from algokit.coup.game import Game, GameError
from algokit.coup.roles import Baron, General, Governor, Judge, Merchant, Spy


# Governor

@pytest.fixture
def governor_game():
    game = Game()
    gov = Governor(game, "Gov")
    other = Merchant(game, "Other")
    return game, gov, other


def test_governor_role(governor_game):
    _, gov, _ = governor_game
    assert gov.role == "Governor"


def test_governor_tax_gives_three(governor_game):
    game, gov, _ = governor_game
    gov.tax()
    assert gov.coins == 3
    assert gov.last_action == "tax"
    assert game.turn() == "Other"


def test_governor_undo_removes_two(governor_game):
    game, gov, other = governor_game
    game.advance_turn()
    other.tax()
    gov.undo(other)
    assert other.coins == 0


def test_governor_undo_requires_tax(governor_game):
    _, gov, other = governor_game
    with pytest.raises(GameError, match="Governor can only undo a tax action."):
        gov.undo(other)


def test_governor_undo_dead_target(governor_game):
    game, gov, other = governor_game
    game.remove_player(other)
    with pytest.raises(GameError, match="Cannot undo a dead player."):
        gov.undo(other)


def test_governor_undo_not_enough_coins(governor_game):
    game, gov, other = governor_game
    game.advance_turn()
    other.tax()
    other.remove_coins(1)
    with pytest.raises(GameError, match="Target does not have enough coins to undo tax."):
        gov.undo(other)


def test_governor_tax_when_sanctioned(governor_game):
    game, gov, other = governor_game
    game.advance_turn()
    other.add_coins(5)
    other.sanction(gov)
    with pytest.raises(GameError, match="You are sanctioned and cannot tax."):
        gov.tax()


# Spy

@pytest.fixture
def spy_game():
    game = Game()
    spy = Spy(game, "Spy")
    target = General(game, "Target")
    return game, spy, target


def test_spy_role(spy_game):
    _, spy, _ = spy_game
    assert spy.role == "Spy"


def test_spy_block_arrest(spy_game):
    game, spy, target = spy_game
    spy.block_arrest(target)
    assert game.turn() == "Spy"
    game.advance_turn()
    with pytest.raises(GameError, match="Arrest blocked by Spy."):
        target.arrest(spy)


def test_spy_block_arrest_dead_target(spy_game):
    game, spy, target = spy_game
    game.remove_player(target)
    with pytest.raises(GameError, match="Target is dead."):
        spy.block_arrest(target)


def test_spy_peek(spy_game, capsys):
    game, spy, target = spy_game
    target.add_coins(4)
    assert spy.peek(target) == 4
    assert capsys.readouterr().out == "Target has 4 coins.\n"
    assert game.turn() == "Spy"
    assert spy.last_action == "peek"
    assert spy.last_target is target


def test_spy_peek_dead_target(spy_game):
    game, spy, target = spy_game
    game.remove_player(target)
    with pytest.raises(GameError, match="Target is dead."):
        spy.peek(target)


# Baron

@pytest.fixture
def baron_game():
    game = Game()
    baron = Baron(game, "Baron")
    other = Spy(game, "Other")
    return game, baron, other


def test_baron_role(baron_game):
    _, baron, _ = baron_game
    assert baron.role == "Baron"


def test_baron_invest(baron_game):
    game, baron, _ = baron_game
    baron.add_coins(3)
    baron.invest()
    assert baron.coins == 6
    assert baron.last_action == "invest"
    assert game.turn() == "Other"


def test_baron_invest_needs_three_coins(baron_game):
    _, baron, _ = baron_game
    baron.add_coins(2)
    with pytest.raises(GameError):
        baron.invest()
    assert baron.coins == 2


def test_baron_compensated_when_sanctioned(baron_game):
    game, baron, other = baron_game
    other.add_coins(5)
    game.advance_turn()
    other.sanction(baron)
    assert baron.coins == 1
    assert other.coins == 2


# General

@pytest.fixture
def general_game():
    game = Game()
    general = General(game, "General")
    other = Spy(game, "Other")
    return game, general, other


def test_general_role(general_game):
    _, general, _ = general_game
    assert general.role == "General"


def test_general_undo_coup(general_game):
    _, general, other = general_game
    general.add_coins(5)
    general.undo(other)
    assert general.coins == 0
    assert general.last_action == "defend_coup"
    assert general.last_target is other


def test_general_undo_not_enough_coins(general_game):
    _, general, other = general_game
    with pytest.raises(GameError, match="Not enough coins to defend against a coup."):
        general.undo(other)


def test_general_refunded_when_arrested(general_game):
    game, general, other = general_game
    general.add_coins(2)
    game.advance_turn()
    other.arrest(general)
    assert general.coins == 2
    assert other.coins == 1


# Judge

@pytest.fixture
def judge_game():
    game = Game()
    judge = Judge(game, "Judge")
    other = Spy(game, "Other")
    return game, judge, other


def test_judge_role(judge_game):
    _, judge, _ = judge_game
    assert judge.role == "Judge"


def test_judge_undo_bribe(judge_game):
    game, judge, other = judge_game
    other.add_coins(5)
    game.advance_turn()
    other.bribe()
    judge.undo(other)
    assert other.coins == 1
    assert judge.last_action == "undo_bribe"
    assert judge.last_target is other
    assert other.last_action == "bribe_blocked"
    assert other.last_target is judge


def test_judge_undo_requires_bribe(judge_game):
    game, judge, other = judge_game
    game.advance_turn()
    other.tax()
    with pytest.raises(GameError, match="Judge can only undo a bribe action."):
        judge.undo(other)


def test_judge_undo_dead_target(judge_game):
    game, judge, other = judge_game
    game.remove_player(other)
    with pytest.raises(GameError, match="Cannot undo action of a dead player."):
        judge.undo(other)


def test_sanctioning_judge_costs_four(judge_game):
    game, judge, other = judge_game
    other.add_coins(5)
    game.advance_turn()
    other.sanction(judge)
    assert other.coins == 1
    assert judge.sanctioned


# Merchant

@pytest.fixture
def merchant_game():
    game = Game()
    merchant = Merchant(game, "Merchant")
    other = Spy(game, "Other")
    return game, merchant, other


def test_merchant_role(merchant_game):
    _, merchant, _ = merchant_game
    assert merchant.role == "Merchant"


def test_merchant_bonus_with_three_coins(merchant_game):
    _, merchant, _ = merchant_game
    merchant.add_coins(3)
    merchant.start_turn_bonus()
    assert merchant.coins == 4


def test_merchant_no_bonus_under_three(merchant_game):
    _, merchant, _ = merchant_game
    merchant.add_coins(2)
    merchant.start_turn_bonus()
    assert merchant.coins == 2


def test_merchant_no_bonus_when_dead(merchant_game):
    game, merchant, _ = merchant_game
    game.remove_player(merchant)
    with pytest.raises(GameError, match="Dead players cannot receive start-of-turn bonuses."):
        merchant.start_turn_bonus()


def test_merchant_pays_bank_when_arrested(merchant_game):
    game, merchant, other = merchant_game
    other.add_coins(3)
    merchant.add_coins(4)
    game.advance_turn()
    other.arrest(merchant)
    assert merchant.coins == 2
    assert other.coins == 3


# Roster

def test_all_roles_join_game_in_order():
    game = Game()
    roles = [
        Governor(game, "Governor"),
        Spy(game, "Spy"),
        Baron(game, "Baron"),
        General(game, "General"),
        Judge(game, "Judge"),
        Merchant(game, "Merchant"),
    ]
    assert game.players() == [p.role for p in roles]
    assert game.turn() == "Governor"
    with pytest.raises(GameError):
        Governor(game, "7")