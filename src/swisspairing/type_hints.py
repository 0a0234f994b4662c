"""Type hints used in Swiss Pairing."""

from typing import Dict, List, Literal, Set

# Stable player identifier
PlayerId = str
# Bucket key, e.g. "2-1"
RecordKey = str

# A player's view of a resolved pairing
PlayerOutcome = Literal["win", "loss"]
Division = Literal["junior", "senior", "master"]

# Record key -> player ids sharing that record
Buckets = Dict[RecordKey, List[PlayerId]]
# Player id -> ids of opponents already faced
OpponentHistory = Dict[PlayerId, Set[PlayerId]]

#  LocalWords:  RecordKey
