"""Exhaustive match selection for Americano rounds.

For a pool of ``k`` players every 4-player subset is visited with four
nested ascending index loops, and every subset is tried in each of its
three possible team splits. That is ``3 * C(k, 4)`` candidates per call,
O(k^4): fine for a few dozen players, hopeless for hundreds. The pool size
is therefore capped by ``max_pool_size``.
"""

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

from math import comb
from typing import List, Optional, Sequence

from americanopairing.constants import (
    MAX_POOL_SIZE,
    PLAYERS_PER_MATCH,
    REPEAT_OPPONENT_PENALTY,
    REPEAT_PARTNER_PENALTY,
)
from americanopairing.exceptions import PoolSizeExceededException
from americanopairing.models.tournament.diversity_ledger import DiversityLedger
from americanopairing.type_hints import MaybeMatchPairing, PlayerId, Team

# The three ways to split four players (by position) into two teams of two
TEAM_SPLITS = (
    (0, 1, 2, 3),
    (0, 2, 1, 3),
    (0, 3, 1, 2),
)


def candidate_count(pool_size: int) -> int:
    """Number of (subset, split) candidates scored for a pool of this size."""
    return len(TEAM_SPLITS) * comb(pool_size, PLAYERS_PER_MATCH)


def check_pool_size(pool_size: int, max_pool_size: int = MAX_POOL_SIZE) -> None:
    """Refuse pools the exhaustive search cannot handle in reasonable time.

    Raises:
        PoolSizeExceededException: If pool_size is above max_pool_size
    """
    if pool_size > max_pool_size:
        raise PoolSizeExceededException(
            f"Pool of {pool_size} players exceeds the optimizer ceiling of "
            f"{max_pool_size} ({candidate_count(pool_size)} candidates per court)"
        )


def _penalty(
    p1: int,
    p2: int,
    p3: int,
    p4: int,
    partner_masks: List[int],
    opponent_masks: List[int],
) -> int:
    score = 0
    if (partner_masks[p1] >> p2) & 1:
        score += REPEAT_PARTNER_PENALTY
    if (partner_masks[p3] >> p4) & 1:
        score += REPEAT_PARTNER_PENALTY

    opp1 = opponent_masks[p1]
    opp2 = opponent_masks[p2]
    repeats = (
        ((opp1 >> p3) & 1)
        + ((opp1 >> p4) & 1)
        + ((opp2 >> p3) & 1)
        + ((opp2 >> p4) & 1)
    )
    return score + repeats * REPEAT_OPPONENT_PENALTY


def match_penalty(team1: Team, team2: Team, ledger: DiversityLedger) -> int:
    """Repeat penalty of putting team1 against team2.

    +10 for each team whose players partnered before, +5 for each
    cross-team pair that already faced each other. 0 means all fresh.
    """
    a, b = (ledger.index_of(p) for p in team1)
    c, d = (ledger.index_of(p) for p in team2)
    return _penalty(a, b, c, d, ledger.partner_masks, ledger.opponent_masks)


def select_best_match(
    pool: Sequence[PlayerId],
    ledger: DiversityLedger,
    max_pool_size: int = MAX_POOL_SIZE,
) -> MaybeMatchPairing:
    """Pick the grouping and team split with the lowest repeat penalty.

    Candidates are visited in a fixed order (ascending subset indices, then
    the splits of ``TEAM_SPLITS``) and only a strictly lower penalty
    replaces the current best, so ties go to the first candidate found.

    Parameters
    ----------
    pool : sequence of str
        Players still available this round, in rotation order.
    ledger : DiversityLedger
        Partner/opponent history of the current generation run.
    max_pool_size : int
        Largest pool accepted.

    Returns
    -------
    tuple of (team1, team2) or None
        None if the pool has fewer than four players.

    Raises
    ------
    PoolSizeExceededException
        If the pool is larger than ``max_pool_size``.
    """
    k = len(pool)
    if k < PLAYERS_PER_MATCH:
        return None
    check_pool_size(k, max_pool_size)

    idx = [ledger.index_of(p) for p in pool]
    partner_masks = ledger.partner_masks
    opponent_masks = ledger.opponent_masks

    best: Optional[tuple] = None
    best_score: Optional[int] = None

    for i in range(k - 3):
        for j in range(i + 1, k - 2):
            for m in range(j + 1, k - 1):
                for n in range(m + 1, k):
                    group = (i, j, m, n)
                    for w, x, y, z in TEAM_SPLITS:
                        p1, p2, p3, p4 = group[w], group[x], group[y], group[z]
                        score = _penalty(
                            idx[p1],
                            idx[p2],
                            idx[p3],
                            idx[p4],
                            partner_masks,
                            opponent_masks,
                        )
                        if best_score is None or score < best_score:
                            best_score = score
                            best = (p1, p2, p3, p4)
                            if score == 0:
                                # nothing can strictly beat a zero penalty
                                return _as_teams(pool, best)

    return _as_teams(pool, best)


def _as_teams(pool: Sequence[PlayerId], positions: tuple) -> MaybeMatchPairing:
    p1, p2, p3, p4 = positions
    return (pool[p1], pool[p2]), (pool[p3], pool[p4])
