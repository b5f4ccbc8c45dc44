"""The six playable roles of Coup and their special abilities."""

from __future__ import annotations

from .game import GameError
from .player import Player


class Governor(Player):
    """Collects three coins on tax and can cancel another player's tax."""

    @property
    def role(self) -> str:
        return "Governor"

    def tax(self) -> None:
        """Take three coins from the bank."""
        self.require_turn()
        if self.sanctioned:
            raise GameError("You are sanctioned and cannot tax.")
        self._forbid_hoarding()
        self.add_coins(3)
        previous = self.last_action
        self.set_last_action("tax")
        self.sanctioned = False
        self._finish(previous)

    def undo(self, target: Player) -> None:
        """Take back the two coins a target gained from tax."""
        if not target.alive:
            raise GameError("Cannot undo a dead player.")
        if target.last_action != "tax":
            raise GameError("Governor can only undo a tax action.")
        if target.coins < 2:
            raise GameError("Target does not have enough coins to undo tax.")
        target.remove_coins(2)


class Spy(Player):
    """Can look at another player's coins and block their next arrest."""

    @property
    def role(self) -> str:
        return "Spy"

    def peek(self, target: Player) -> int:
        """Report and return how many coins the target holds."""
        if not target.alive:
            raise GameError("Target is dead.")
        self.set_last_action("peek", target)
        print(f"{target.name} has {target.coins} coins.")
        return target.coins

    def block_arrest(self, target: Player) -> None:
        """Stop the target from arresting on their next action."""
        if not target.alive:
            raise GameError("Target is dead.")
        target.arrest_blocked = True
        self.set_last_action("block_arrest", target)


class Baron(Player):
    """Can invest coins for profit and is compensated when sanctioned."""

    @property
    def role(self) -> str:
        return "Baron"

    def invest(self) -> None:
        """Pay three coins to receive six."""
        self.require_turn()
        self._forbid_hoarding()
        self.remove_coins(3)
        self.add_coins(6)
        self.set_last_action("invest")
        self.game.advance_turn()

    def _on_sanctioned(self, attacker: Player) -> None:
        self.add_coins(1)


class General(Player):
    """Can pay to stop a coup and gets back the coin an arrest takes."""

    @property
    def role(self) -> str:
        return "General"

    def undo(self, target: Player) -> None:
        """Pay five coins to protect the target from a coup."""
        if self.coins < 5:
            raise GameError("Not enough coins to defend against a coup.")
        self.remove_coins(5)
        self.set_last_action("defend_coup", target)

    def _yield_to_arrest(self, attacker: Player) -> None:
        super()._yield_to_arrest(attacker)
        self.add_coins(1)


class Judge(Player):
    """Can cancel a bribe; sanctioning a Judge costs one extra coin."""

    @property
    def role(self) -> str:
        return "Judge"

    def undo(self, target: Player) -> None:
        """Block the target's bribe."""
        if not target.alive:
            raise GameError("Cannot undo action of a dead player.")
        if target.last_action != "bribe":
            raise GameError("Judge can only undo a bribe action.")
        self.set_last_action("undo_bribe", target)
        target.set_last_action("bribe_blocked", self)

    def _on_sanctioned(self, attacker: Player) -> None:
        attacker.remove_coins(1)


class Merchant(Player):
    """Earns a bonus coin when starting a turn rich; pays the bank when arrested."""

    @property
    def role(self) -> str:
        return "Merchant"

    def start_turn_bonus(self) -> None:
        """Gain one coin if holding three or more at the start of the turn."""
        if not self.alive:
            raise GameError("Dead players cannot receive start-of-turn bonuses.")
        if self.coins >= 3:
            self.add_coins(1)

    def _yield_to_arrest(self, attacker: Player) -> None:
        self.remove_coins(2)