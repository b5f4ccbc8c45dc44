"""The base player of a game of Coup and the actions every role shares."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .game import Game, GameError

COUP_LIMIT = 10


class Player(ABC):
    """A participant who holds coins and acts on their turn.

    A player joins ``game`` as soon as it is created.
    """

    def __init__(self, game: Game, name: str) -> None:
        self._game = game
        self._name = name
        self._coins = 0
        self.alive = True
        self.sanctioned = False
        self.arrest_blocked = False
        self._last_action = ""
        self._last_target: Player | None = None
        game.add_player(self)

    @property
    @abstractmethod
    def role(self) -> str:
        """The name of this player's role."""

    @property
    def game(self) -> Game:
        return self._game

    @property
    def name(self) -> str:
        return self._name

    @property
    def coins(self) -> int:
        return self._coins

    @property
    def last_action(self) -> str:
        return self._last_action

    @property
    def last_target(self) -> Player | None:
        return self._last_target

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, coins={self._coins}, alive={self.alive})"

    # Checks

    def require_turn(self) -> None:
        """Raise unless this player is alive and it is their turn."""
        if not self.alive:
            raise GameError(f"{self._name} is dead.")
        if self._game.turn() != self._name:
            raise GameError(f"It's not {self._name}'s turn.")

    def _forbid_hoarding(self) -> None:
        if self._coins >= COUP_LIMIT:
            raise GameError("You must coup when holding 10 or more coins.")

    def _finish(self, previous_action: str) -> None:
        # An action taken right after a bribe does not end the turn.
        if previous_action != "bribe":
            self._game.advance_turn()

    # Hooks for roles that react to being targeted

    def _yield_to_arrest(self, attacker: Player) -> None:
        """Hand over what an arrest takes from this player."""
        self.remove_coins(1)
        attacker.add_coins(1)

    def _on_sanctioned(self, attacker: Player) -> None:
        """React to a sanction before the attacker pays for it."""

    # Actions

    def gather(self) -> None:
        """Take one coin from the bank."""
        self.require_turn()
        self._forbid_hoarding()
        if self.sanctioned:
            raise GameError("You are sanctioned and cannot gather.")
        self._coins += 1
        previous = self._last_action
        self.set_last_action("gather")
        self.arrest_blocked = False
        self._finish(previous)

    def tax(self) -> None:
        """Take two coins from the bank."""
        self.require_turn()
        self._forbid_hoarding()
        if self.sanctioned:
            raise GameError("You are sanctioned and cannot tax.")
        self._coins += 2
        previous = self._last_action
        self.set_last_action("tax")
        self.arrest_blocked = False
        self._finish(previous)

    def bribe(self) -> None:
        """Pay four coins to take another action this turn."""
        self.require_turn()
        self._forbid_hoarding()
        self.remove_coins(4)
        self.set_last_action("bribe")
        self.sanctioned = False
        self.arrest_blocked = False

    def arrest(self, target: Player) -> None:
        """Take a coin from another player."""
        self.require_turn()
        if self.arrest_blocked:
            raise GameError("Arrest blocked by Spy.")
        self._forbid_hoarding()
        if not target.alive:
            raise GameError("Target is already eliminated.")
        if self._last_action == "arrest" and self._last_target is target:
            raise GameError("Cannot arrest the same player twice in a row.")
        if target.coins == 0:
            raise GameError("Target has no coins to take.")
        target._yield_to_arrest(self)
        previous = self._last_action
        self.set_last_action("arrest", target)
        self.sanctioned = False
        self._finish(previous)

    def sanction(self, target: Player) -> None:
        """Pay three coins to stop a player from gathering or taxing."""
        self.require_turn()
        self._forbid_hoarding()
        if not target.alive:
            raise GameError("Target is already eliminated.")
        target._on_sanctioned(self)
        self.remove_coins(3)
        previous = self._last_action
        self.set_last_action("sanction", target)
        target.sanctioned = True
        self.sanctioned = False
        self.arrest_blocked = False
        self._finish(previous)

    def coup(self, target: Player) -> None:
        """Pay seven coins to eliminate another player."""
        self.require_turn()
        if not target.alive:
            raise GameError("Target is already eliminated.")
        self.remove_coins(7)
        target.alive = False
        previous = self._last_action
        self.set_last_action("coup", target)
        self._game.remove_player(target)
        self.sanctioned = False
        self.arrest_blocked = False
        self._finish(previous)

    def undo(self, target: Player) -> None:
        """Cancel an action of another player; unsupported unless a role allows it."""
        raise GameError("This role does not support undo.")

    # Coins and history

    def add_coins(self, amount: int) -> None:
        self._coins += amount

    def remove_coins(self, amount: int) -> None:
        """Take coins away, raising if the player cannot afford it."""
        if self._coins < amount:
            raise GameError("Not enough coins for this action.")
        self._coins -= amount

    def set_last_action(self, action: str, target: Player | None = None) -> None:
        self._last_action = action
        self._last_target = target