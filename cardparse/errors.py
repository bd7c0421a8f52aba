"""
I define the error taxonomy raised by the parsers. Both concrete kinds carry the
offending input text for diagnostics.

Key classes: CardParseError — common base, a ValueError; UnrecognizedCardValue — the
value token at the current position could not be decoded; UnrecognizedSuit — the suit
token at the current position could not be decoded.

Errors propagate to the caller unchanged; nothing in the library catches them.
"""


class CardParseError(ValueError):
	description = "Card parse error"

	def __init__(self, text: str):
		super().__init__(text)
		self.text = text

	def __str__(self) -> str:
		return f"{self.description}: {self.text}"


class UnrecognizedCardValue(CardParseError):
	description = "Unrecognized card value"


class UnrecognizedSuit(CardParseError):
	description = "Unrecognized suit"
