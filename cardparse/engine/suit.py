"""
I define Suit as an IntEnum with four values. The order Clubs < Hearts < Spades <
Diamonds carries no game meaning; it only makes Card totally ordered.
"""

from enum import IntEnum

class Suit(IntEnum):
    Clubs    = 0
    Hearts   = 1
    Spades   = 2
    Diamonds = 3
