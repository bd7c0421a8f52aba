"""
I parse one card token off the front of a text. The grammar allows no white space
before, after, or inside the card:

	Value: 'A' | '2' | '3' | '4' | '5' | '6' | '7' | '8' | '9' | 'T' | 'J' | 'Q' | 'K' | '10'
	Suit:  'C' | 'H' | 'S' | 'D'
	Card:  Value Suit

Key functions: read_value — decode the value token and return the rest; read_suit —
decode one suit character and return the rest; parse — value then suit, returning the
Card and the unconsumed remainder.

Outputs are (decoded, remainder) tuples so a caller can keep reading trailing text.
Failures raise UnrecognizedCardValue or UnrecognizedSuit; parse lets the first one
through untouched.
"""

from typing import Tuple

from cardparse.constants import VALUE_TOKENS, SUIT_TOKENS, TEN_PREFIX, TEN_SUFFIX
from cardparse.engine.card import Card
from cardparse.engine.suit import Suit
from cardparse.engine.value import Value
from cardparse.errors import UnrecognizedCardValue, UnrecognizedSuit


def read_value(text: str) -> Tuple[Value, str]:
	if not text:
		raise UnrecognizedCardValue(text)

	head = text[0]

	if head in VALUE_TOKENS:
		return VALUE_TOKENS[head], text[1:]

	if head == TEN_PREFIX:
		if text[1:2] == TEN_SUFFIX:
			return Value.Ten, text[2:]

	# the error carries the whole input, not just the bad character
	raise UnrecognizedCardValue(text)


def read_suit(text: str) -> Tuple[Suit, str]:
	if not text:
		raise UnrecognizedSuit(text)

	suit = SUIT_TOKENS.get(text[0])
	if suit is None:
		raise UnrecognizedSuit(text)

	return suit, text[1:]


def parse(text: str) -> Tuple[Card, str]:
	value, rest = read_value(text)
	suit, rest = read_suit(rest)
	return Card.new(value, suit), rest
