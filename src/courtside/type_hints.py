"""Type hints used in Courtside."""

from typing import List, Literal, Sequence, Tuple

# Side literals, accepted wherever a Side enum is expected
SideLiteral = Literal["A", "B"]

# Mode literals, accepted wherever a MatchMode enum is expected
ModeLiteral = Literal["standard", "short"]

# Registered player ids, in registration order
Roster = Sequence[str]
# Two player ids forming a doubles team
PlayerPair = Tuple[str, str]
# Explicit pairs for manual team creation
PlayerPairs = List[PlayerPair]

#  LocalWords:  PlayerPair PlayerPairs
