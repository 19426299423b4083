"""Closed enumerations shared by the scoring and tournament models."""

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

from enum import Enum


class MatchMode(str, Enum):
    """Scoring format of a tennis match."""

    # Points -> games -> sets -> match, best of 3 sets
    STANDARD = "standard"
    # Points -> games -> match, best of 3 games, fixed server per game
    SHORT_FORMAT = "short"


class Side(str, Enum):
    """One of the two sides of a scoring match."""

    A = "A"
    B = "B"

    @property
    def opponent(self) -> "Side":
        """The other side."""
        return Side.B if self is Side.A else Side.A


class GameState(Enum):
    """State of the game currently being played."""

    IN_PROGRESS = "in_progress"
    DEUCE = "deuce"
    ADVANTAGE_A = "advantage_a"
    ADVANTAGE_B = "advantage_b"


class ServeType(str, Enum):
    """How the point was put in play."""

    FIRST = "first"
    SECOND = "second"
    DOUBLE_FAULT = "double_fault"


class TournamentStage(str, Enum):
    """Stage of a doubles tournament. Stages only ever move forward."""

    SETUP = "setup"
    ROUND_ROBIN = "round_robin"
    KNOCKOUT = "knockout"
    COMPLETED = "completed"

    @property
    def order(self) -> int:
        """Position of the stage in the tournament lifecycle."""
        return _STAGE_ORDER.index(self)

    def can_advance_to(self, other: "TournamentStage") -> bool:
        """Whether other is the stage directly after this one."""
        return other.order == self.order + 1


_STAGE_ORDER = [
    TournamentStage.SETUP,
    TournamentStage.ROUND_ROBIN,
    TournamentStage.KNOCKOUT,
    TournamentStage.COMPLETED,
]


class MatchStage(str, Enum):
    """Stage of a bracket match within a tournament."""

    ROUND_ROBIN = "round_robin"
    SEMIFINAL = "semi"
    FINAL = "final"
