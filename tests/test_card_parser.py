"""
Test suite for the single-card grammar: value reader, suit reader, and parse with
remainder preservation and first-error propagation.
"""

import pytest
from hypothesis import given, strategies as st

from cardparse.engine.card import Card
from cardparse.engine.suit import Suit
from cardparse.engine.value import Value
from cardparse.errors import CardParseError, UnrecognizedCardValue, UnrecognizedSuit
from cardparse.parsing.card_parser import parse, read_suit, read_value


def test_parse_suit():
	assert read_suit("S3") == (Suit.Spades, "3")
	assert read_suit("H4") == (Suit.Hearts, "4")
	assert read_suit("D5") == (Suit.Diamonds, "5")
	assert read_suit("C6") == (Suit.Clubs, "6")


@pytest.mark.parametrize("text", ["X", "", "s", "10"])
def test_parse_suit_rejects(text):
	with pytest.raises(UnrecognizedSuit) as ei:
		read_suit(text)
	assert ei.value.text == text


@pytest.mark.parametrize(
 "token,expected",
 [
  ("A", Value.Ace),
  ("2", Value.Two),
  ("3", Value.Three),
  ("4", Value.Four),
  ("5", Value.Five),
  ("6", Value.Six),
  ("7", Value.Seven),
  ("8", Value.Eight),
  ("9", Value.Nine),
  ("T", Value.Ten),
  ("J", Value.Jack),
  ("Q", Value.Queen),
  ("K", Value.King),
  ("10", Value.Ten),
 ],
)
def test_parse_value(token, expected):
	assert read_value(token + "X") == (expected, "X")


@pytest.mark.parametrize("text", ["XX", "11", "1", "1S", "", "a", "tS", " AS"])
def test_parse_value_rejects_with_full_input(text):
	"""
	The error carries the whole input given to the value reader, not only the first character.
	"""
	with pytest.raises(UnrecognizedCardValue) as ei:
		read_value(text)
	assert ei.value.text == text


def test_parse():
	assert parse("ASREST") == (Card.new(Value.Ace, Suit.Spades), "REST")
	assert parse("2SREST") == (Card.new(Value.Two, Suit.Spades), "REST")
	assert parse("AHREST") == (Card.new(Value.Ace, Suit.Hearts), "REST")
	assert parse("8CREST") == (Card.new(Value.Eight, Suit.Clubs), "REST")
	assert parse("10SREST") == (Card.new(Value.Ten, Suit.Spades), "REST")


def test_ten_aliases_parse_equal():
	assert parse("TD")[0] == parse("10D")[0]


def test_parse_bad_value_raises_value_error():
	with pytest.raises(UnrecognizedCardValue) as ei:
		parse("XS")
	assert ei.value.text == "XS"


def test_parse_bad_suit_after_good_value():
	"""
	A valid value followed by a bad suit reports the text left after the value.
	"""
	with pytest.raises(UnrecognizedSuit) as ei:
		parse("10X")
	assert ei.value.text == "X"

	with pytest.raises(UnrecognizedSuit) as ei:
		parse("K")
	assert ei.value.text == ""


def test_errors_render_description_and_text():
	err = UnrecognizedSuit("X")
	assert str(err) == "Unrecognized suit: X"
	assert str(UnrecognizedCardValue("ZZ")) == "Unrecognized card value: ZZ"
	assert isinstance(err, CardParseError)
	assert isinstance(err, ValueError)


@given(st.text())
def test_ace_of_spades_keeps_any_remainder(rest):
	assert parse("AS" + rest) == (Card.new(Value.Ace, Suit.Spades), rest)


@given(st.text(min_size=2, max_size=6))
def test_parse_is_deterministic(text):
	try:
		first = parse(text)
	except CardParseError as e:
		with pytest.raises(type(e)):
			parse(text)
	else:
		assert parse(text) == first
