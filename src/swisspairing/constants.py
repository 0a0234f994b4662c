# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Round limits (standard Swiss cutoff for this circuit)
MIN_ROUNDS = 1
MAX_ROUNDS = 8

# Symbolic match scores (best of three)
SCORE_PLAYER1_WIN = "2-0"
SCORE_PLAYER2_WIN = "2-1"

# Result simulation: P(player 1 wins) = BASE + STEP * (wins1 - wins2)
WIN_PROBABILITY_BASE = 0.5
WIN_PROBABILITY_STEP = 0.1

# Day-2 cut: players reaching this win count by the last Swiss round advance
DAY2_ROUND = 8
DAY2_MIN_WINS = 6

# Result strings for a player's view of a pairing
RESULT_WIN = "win"
RESULT_LOSS = "loss"

# Age divisions
DIVISION_JUNIOR = "junior"
DIVISION_SENIOR = "senior"
DIVISION_MASTER = "master"
DIVISIONS = [DIVISION_JUNIOR, DIVISION_SENIOR, DIVISION_MASTER]

# Oldest age (at the end of the season year) for each division
JUNIOR_MAX_AGE = 12
SENIOR_MAX_AGE = 16

# Logging
LOG_LEVEL_ENV_VAR = "SWISSPAIRING_LOG_LEVEL"
LOG_DIR_ENV_VAR = "SWISSPAIRING_LOG_DIR"
LOG_FILE_NAME = "swiss-pairing.log"
