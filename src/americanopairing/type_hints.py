"""Type hints used in Americano Pairing."""

from typing import Literal, Optional, Tuple

# Players are identified by their (unique) name
PlayerId = str

# Two players sharing one side of the court
Team = Tuple[PlayerId, PlayerId]
# team1, team2 as picked by the optimizer
MatchPairing = Tuple[Team, Team]
MaybeMatchPairing = Optional[MatchPairing]

MatchStatus = Literal["pending", "completed"]


#  LocalWords:  MatchPairing
