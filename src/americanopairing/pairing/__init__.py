"""Americano pairing engine."""

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

from americanopairing.pairing.americano import (
    RoundBuilder,
    ScheduleGenerator,
    generate_schedule,
    generate_schedule_from_config,
    rounds_for_players,
)
from americanopairing.pairing.optimizer import match_penalty, select_best_match

__all__ = [
    "RoundBuilder",
    "ScheduleGenerator",
    "generate_schedule",
    "generate_schedule_from_config",
    "match_penalty",
    "rounds_for_players",
    "select_best_match",
]
