"""
I define Value as an IntEnum with the thirteen card ranks. I keep numeric ordering
consistent with card-game rank where Ace counts low: Ace < Two < ... < Ten < Jack <
Queen < King.

Key class: Value with members Ace..King.

Inputs: enum usage. Outputs: stable integer ordering. Invariants: Ace is always the
lowest member; the mapping is fixed. Dependencies: stdlib enum.
"""

from enum import IntEnum


class Value(IntEnum):
	Ace = 1
	Two = 2
	Three = 3
	Four = 4
	Five = 5
	Six = 6
	Seven = 7
	Eight = 8
	Nine = 9
	Ten = 10
	Jack = 11
	Queen = 12
	King = 13
