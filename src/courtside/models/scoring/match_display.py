"""User-facing display values for a scoring match."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PointDisplay:
    """Point score in tennis notation ("0", "15", "30", "40", "Deuce", "Ad")."""

    a: str
    b: str

    def to_dict(self) -> Dict[str, Any]:
        return {"a": self.a, "b": self.b}


@dataclass(frozen=True)
class ScoreCount:
    """A plain numeric score for both sides (games or sets)."""

    a: int
    b: int

    def to_dict(self) -> Dict[str, Any]:
        return {"a": self.a, "b": self.b}


@dataclass(frozen=True)
class MatchDisplay:
    """Everything a scoreboard needs to render the current match.

    Attributes
    ----------
    points : PointDisplay
        Tennis notation of the game in progress.
    games : ScoreCount
        Games in the current set (standard) or match (short-format).
    sets : ScoreCount or None
        Sets won, None in short-format.
    current_set : int
        Set being played, 0 in short-format.
    game_number : int
        Game being played.
    total_games : int
        3 in short-format, 0 (open-ended) in standard.
    server : str or None
        Current server id in short-format.
    is_tie_break : bool
        True when a standard set stands at 6-6.
    """

    points: PointDisplay
    games: ScoreCount
    sets: Optional[ScoreCount]
    current_set: int
    game_number: int
    total_games: int
    server: Optional[str] = None
    is_tie_break: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the display to dictionary."""
        return {
            "points": self.points.to_dict(),
            "games": self.games.to_dict(),
            "sets": self.sets.to_dict() if self.sets is not None else None,
            "current_set": self.current_set,
            "game_number": self.game_number,
            "total_games": self.total_games,
            "server": self.server,
            "is_tie_break": self.is_tie_break,
        }
