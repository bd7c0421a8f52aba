"""
I hold the token tables and defaults shared by the parsers and the config layer.

Key symbols: VALUE_TOKENS — single-character value tokens; TEN_PREFIX/TEN_SUFFIX —
the two characters of the '10' token; SUIT_TOKENS — suit characters; DEFAULT_DELIMITER
— separator used by parse_vec; ENV_DELIMITER/ENV_STRICT — environment variable names
read by ParseConfig.from_env.

Tokens are case-sensitive and uppercase only.
"""

from cardparse.engine.value import Value
from cardparse.engine.suit import Suit

VALUE_TOKENS = {
	"A": Value.Ace,
	"2": Value.Two,
	"3": Value.Three,
	"4": Value.Four,
	"5": Value.Five,
	"6": Value.Six,
	"7": Value.Seven,
	"8": Value.Eight,
	"9": Value.Nine,
	"T": Value.Ten,
	"J": Value.Jack,
	"Q": Value.Queen,
	"K": Value.King,
}

TEN_PREFIX = "1"
TEN_SUFFIX = "0"

SUIT_TOKENS = {"S": Suit.Spades, "H": Suit.Hearts, "D": Suit.Diamonds, "C": Suit.Clubs}

DEFAULT_DELIMITER = ","

ENV_DELIMITER = "CARDPARSE_DELIMITER"
ENV_STRICT = "CARDPARSE_STRICT"
