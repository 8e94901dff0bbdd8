"""Partner and opponent history used while generating a schedule."""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
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

from typing import Any, Dict, List, Sequence, Set

from americanopairing.exceptions import DuplicatePlayerException, UnknownPlayerException
from americanopairing.type_hints import PlayerId, Team


class DiversityLedger:
    """
    Tracks who partnered and who faced whom during one generation run.

    Every player gets a dense index ``0..N-1`` when the ledger is created.
    Partner and opponent relations are stored as one integer bit-set per
    player, so bit ``j`` of ``partner_masks[i]`` is set once players ``i``
    and ``j`` shared a team. Both relations are symmetric and only grow.

    Attributes
    ----------
    players : list of str
        Tracked players, position is the dense index.
    partner_masks : list of int
        Bit-set of past partners per player index.
    opponent_masks : list of int
        Bit-set of past opponents per player index.
    """

    def __init__(self, players: Sequence[PlayerId]):
        self.players: List[PlayerId] = list(players)
        self._index: Dict[PlayerId, int] = {}
        for position, player in enumerate(self.players):
            if player in self._index:
                raise DuplicatePlayerException(f"Player listed twice: {player}")
            self._index[player] = position
        self.partner_masks: List[int] = [0] * len(self.players)
        self.opponent_masks: List[int] = [0] * len(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def __contains__(self, player: object) -> bool:
        return player in self._index

    def index_of(self, player: PlayerId) -> int:
        """Dense index of a tracked player."""
        try:
            return self._index[player]
        except KeyError:
            raise UnknownPlayerException(f"Player not tracked: {player}") from None

    def record_played(self, team1: Team, team2: Team) -> None:
        """Record a match: partners within each team, opponents across teams."""
        a, b = (self.index_of(p) for p in team1)
        c, d = (self.index_of(p) for p in team2)

        for x, y in ((a, b), (c, d)):
            self.partner_masks[x] |= 1 << y
            self.partner_masks[y] |= 1 << x

        for x in (a, b):
            for y in (c, d):
                self.opponent_masks[x] |= 1 << y
                self.opponent_masks[y] |= 1 << x

    def has_partnered(self, player1: PlayerId, player2: PlayerId) -> bool:
        """Check if two players have shared a team."""
        return bool(
            (self.partner_masks[self.index_of(player1)] >> self.index_of(player2)) & 1
        )

    def has_opposed(self, player1: PlayerId, player2: PlayerId) -> bool:
        """Check if two players have faced each other."""
        return bool(
            (self.opponent_masks[self.index_of(player1)] >> self.index_of(player2))
            & 1
        )

    def _members(self, mask: int) -> Set[PlayerId]:
        return {p for i, p in enumerate(self.players) if (mask >> i) & 1}

    def partners_of(self, player: PlayerId) -> Set[PlayerId]:
        return self._members(self.partner_masks[self.index_of(player)])

    def opponents_of(self, player: PlayerId) -> Set[PlayerId]:
        return self._members(self.opponent_masks[self.index_of(player)])

    def partnership_count(self) -> int:
        """Number of distinct partnerships recorded so far."""
        return sum(bin(mask).count("1") for mask in self.partner_masks) // 2

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ledger to dictionary."""
        return {
            "partners": {p: sorted(self.partners_of(p)) for p in self.players},
            "opponents": {p: sorted(self.opponents_of(p)) for p in self.players},
        }
