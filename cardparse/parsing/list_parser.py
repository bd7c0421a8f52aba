"""
I parse delimiter-separated lists of card tokens into ordered lists of Card.

Key functions: parse_vec — comma-separated input; parse_vec_pat — caller-supplied
delimiter; parse_vec_with_config — delimiter and strictness taken from a ParseConfig.

Each piece is stripped of surrounding white space and parsed as a single card. The
first failing piece aborts the whole parse and its error reaches the caller unchanged.
An empty input, or two delimiters in a row, yields an empty piece and therefore
UnrecognizedCardValue(""). In strict mode a piece must be consumed completely; any
leftover after the suit is reported as UnrecognizedSuit on the text the suit step saw.
"""

from typing import List

from cardparse.constants import DEFAULT_DELIMITER
from cardparse.engine.card import Card
from cardparse.errors import UnrecognizedSuit
from cardparse.parse_config import ParseConfig
from cardparse.parsing.card_parser import parse, read_value


def parse_vec(text: str) -> List[Card]:
	return parse_vec_pat(text, DEFAULT_DELIMITER)


def parse_vec_pat(text: str, pat: str) -> List[Card]:
	return _parse_pieces(text, pat, strict=True)


def parse_vec_with_config(text: str, config: ParseConfig) -> List[Card]:
	return _parse_pieces(text, config.delimiter, strict=config.strict)


def _parse_pieces(text: str, pat: str, strict: bool) -> List[Card]:
	if not pat:
		raise ValueError("empty delimiter")

	cards = []
	for piece in text.split(pat):
		trimmed = piece.strip()
		card, rest = parse(trimmed)
		if strict and rest:
			_, after_value = read_value(trimmed)
			raise UnrecognizedSuit(after_value)
		cards.append(card)

	return cards
