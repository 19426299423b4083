"""Immutable match state for the tennis scoring engine."""

# Courtside
# Copyright (C) 2025  Courtside developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from courtside.exceptions import InvalidMatchConfigurationException
from courtside.models.enums import MatchMode, Side


@dataclass(frozen=True)
class TeamPlayers:
    """Player ids assigned to each side of a match.

    Attributes
    ----------
    team_a : tuple of str
        Player ids on side A.
    team_b : tuple of str
        Player ids on side B.
    """

    team_a: Tuple[str, ...] = ()
    team_b: Tuple[str, ...] = ()

    def __post_init__(self):
        # Callers may pass lists; snapshots must not share them
        object.__setattr__(self, "team_a", tuple(self.team_a))
        object.__setattr__(self, "team_b", tuple(self.team_b))

    def for_side(self, side: Side) -> Tuple[str, ...]:
        """Player ids on side."""
        return self.team_a if side is Side.A else self.team_b

    def side_of(self, player_id: str) -> Optional[Side]:
        """Side that player_id plays on, or None if not in this match."""
        if player_id in self.team_a:
            return Side.A
        if player_id in self.team_b:
            return Side.B
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team players to dictionary."""
        return {"team_a": list(self.team_a), "team_b": list(self.team_b)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamPlayers":
        """Deserialize team players from dictionary."""
        return cls(
            team_a=tuple(data.get("team_a", ())),
            team_b=tuple(data.get("team_b", ())),
        )


@dataclass(frozen=True)
class CurrentGame:
    """Scoring within the game being played.

    Raw point counts are never shown to a user; they are always mapped to
    tennis notation by the display helpers.

    Attributes
    ----------
    points_a : int
        Raw points won by side A in this game.
    points_b : int
        Raw points won by side B in this game.
    game_number : int
        Game number within the current set (standard) or match (short-format).
    server_index : int
        Index into the match servers (short-format only).
    """

    points_a: int = 0
    points_b: int = 0
    game_number: int = 1
    server_index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the current game to dictionary."""
        return {
            "points_a": self.points_a,
            "points_b": self.points_b,
            "game_number": self.game_number,
            "server_index": self.server_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CurrentGame":
        """Deserialize the current game from dictionary."""
        return cls(
            points_a=data.get("points_a", 0),
            points_b=data.get("points_b", 0),
            game_number=data.get("game_number", 1),
            server_index=data.get("server_index", 0),
        )


@dataclass(frozen=True)
class MatchState:
    """Complete scoring state of a tennis match.

    Instances are never modified; every scoring transition returns a new
    state, so a snapshot can be shared freely between readers.

    Attributes
    ----------
    mode : MatchMode
        Scoring rules in force.
    players : TeamPlayers
        Player ids per side.
    servers : tuple of str or None
        Exactly three ordered server ids in short-format, None in standard.
    current_game : CurrentGame
        Point score of the game in progress.
    games_a, games_b : int
        Games in the current set (standard) or in the match (short-format).
    sets_a, sets_b : int
        Sets won (standard only).
    current_set : int
        Set being played, starting at 1 (standard only).
    winner : Side or None
        Winning side once the match is over.
    completed : bool
        True exactly when winner is set.
    """

    mode: MatchMode
    players: TeamPlayers
    servers: Optional[Tuple[str, ...]] = None
    current_game: CurrentGame = field(default_factory=CurrentGame)
    games_a: int = 0
    games_b: int = 0
    sets_a: int = 0
    sets_b: int = 0
    current_set: int = 1
    winner: Optional[Side] = None
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match state to dictionary."""
        return {
            "mode": self.mode.value,
            "players": self.players.to_dict(),
            "servers": list(self.servers) if self.servers is not None else None,
            "current_game": self.current_game.to_dict(),
            "games_a": self.games_a,
            "games_b": self.games_b,
            "sets_a": self.sets_a,
            "sets_b": self.sets_b,
            "current_set": self.current_set,
            "winner": self.winner.value if self.winner is not None else None,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchState":
        """Deserialize match state from dictionary.

        Raises:
            InvalidMatchConfigurationException: If the snapshot is completed
                without a winner, or has a winner but is not completed
        """
        servers = data.get("servers")
        winner = data.get("winner")
        completed = bool(data.get("completed", False))
        if completed != (winner is not None):
            raise InvalidMatchConfigurationException(
                f"inconsistent snapshot: completed={completed}, winner={winner}"
            )
        return cls(
            mode=MatchMode(data["mode"]),
            players=TeamPlayers.from_dict(data["players"]),
            servers=tuple(servers) if servers is not None else None,
            current_game=CurrentGame.from_dict(data.get("current_game", {})),
            games_a=data.get("games_a", 0),
            games_b=data.get("games_b", 0),
            sets_a=data.get("sets_a", 0),
            sets_b=data.get("sets_b", 0),
            current_set=data.get("current_set", 1),
            winner=Side(winner) if winner is not None else None,
            completed=completed,
        )
