"""Exceptions for use in Courtside"""

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


# ========== Base Application Exception ==========


class CourtsideException(Exception):
    """Base exception for all Courtside errors.

    All custom exceptions in the application inherit from this class, so a
    caller can catch every engine rejection with a single except clause.
    """

    pass


# ========== Scoring Exceptions ==========


class ScoringException(CourtsideException):
    """Base exception for scoring engine errors."""

    pass


class InvalidMatchConfigurationException(ScoringException):
    """Raised when a match is created with a bad mode, roster or server list."""

    pass


class MatchCompletedException(ScoringException):
    """Raised when scoring a point on a match that is already over."""

    pass


class InvalidSideException(ScoringException):
    """Raised when a point is awarded to a side other than A or B."""

    pass


class ServerRotationException(ScoringException):
    """Raised when a short-format match would advance past its last game."""

    pass


class InvalidPointCountException(ScoringException):
    """Raised when a raw point count is negative."""

    pass


class InvalidPointEventException(ScoringException):
    """Raised when a recorded point event cannot be replayed."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(CourtsideException):
    """Base exception for tournament-related errors."""

    pass


class InvalidTournamentException(TournamentException):
    """Raised when a tournament is created with invalid venue or players."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid stage for the requested operation."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a match id is not part of the active stage."""

    pass


class BracketException(TournamentException):
    """Raised when the knockout bracket cannot be built or advanced."""

    pass


# ========== Team Exceptions ==========


class TeamException(CourtsideException):
    """Base exception for team-related errors."""

    pass


class InvalidTeamException(TeamException):
    """Raised when a team has missing or repeated player ids."""

    pass


class DuplicatePlayerException(TeamException):
    """Raised when a player appears in more than one team."""

    pass


class DuplicateTeamException(TeamException):
    """Raised when two teams share an id."""

    pass


class TeamNotFoundException(TeamException):
    """Raised when a requested team cannot be found."""

    pass


# ========== Result Exceptions ==========


class ResultException(CourtsideException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result does not name the match's two teams."""

    pass


class DuplicateResultException(ResultException):
    """Raised when attempting to record a result for a completed match."""

    pass
