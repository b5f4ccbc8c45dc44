"""Turn order and player roster for a game of Coup."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .player import Player


class GameError(RuntimeError):
    """Raised when a game rule is broken or the game is in the wrong state."""


class Game:
    """Keeps the players in join order and tracks whose turn it is."""

    MAX_PLAYERS = 6

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._turn_index = 0

    def turn(self) -> str:
        """Return the name of the player whose turn it is."""
        if not self._players:
            raise GameError("No players in the game.")
        return self._players[self._turn_index].name

    def advance_turn(self) -> None:
        """Pass the turn to the next player who is still alive."""
        if not self._players:
            raise GameError("No players to advance turn.")
        count = len(self._players)
        for step in range(1, count + 1):
            index = (self._turn_index + step) % count
            if self._players[index].alive:
                self._turn_index = index
                return
        raise GameError("No alive players remaining.")

    def add_player(self, player: Player) -> None:
        """Register a player; at most six may join."""
        if len(self._players) >= self.MAX_PLAYERS:
            raise GameError(f"Maximum number of players ({self.MAX_PLAYERS}) reached.")
        self._players.append(player)

    def remove_player(self, player: Player) -> None:
        """Eliminate a player; they stay on the roster but are no longer alive."""
        player.alive = False

    def players(self) -> list[str]:
        """Return the names of the players still alive, in join order."""
        return [p.name for p in self._players if p.alive]

    def all_players(self) -> tuple[Player, ...]:
        """Return every player that joined, alive or not."""
        return tuple(self._players)

    def winner(self) -> str:
        """Return the name of the last player alive."""
        alive = self.players()
        if len(alive) != 1:
            raise GameError("Game is still active — no winner yet.")
        return alive[0]