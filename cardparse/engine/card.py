"""
I implement a typed Card holding a suit and a value. I make instances hashable,
immutable and totally ordered so they can be sorted, put in sets, or used as keys.

Key class: Card (dataclass frozen, ordered). Key method: new — build a card from a
value and a suit, in that argument order.

Invariants: suit is declared before value, so cards compare by suit first and by
value within a suit. Dependencies: engine.value and engine.suit.
"""

from dataclasses import dataclass
from cardparse.engine.value import Value
from cardparse.engine.suit import Suit

@dataclass(frozen=True, order=True)
class Card:
	suit: Suit
	value: Value

	@staticmethod
	def new(value: Value, suit: Suit) -> "Card":
		return Card(suit=suit, value=value)
