"""Playing cards and poker hand ranking (Project Euler problem 54).

Example:
    >>> from euler_library import cards
    >>> p1 = cards.parse_hand("5H 5C 6S 7S KD")
    >>> p2 = cards.parse_hand("2C 3S 8S 8D TD")
    >>> p2.get_rank() > p1.get_rank()
    True
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence, Tuple

from .exceptions import DomainError


class Val(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


class Category(IntEnum):
    """Poker hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


VAL_CHARS = "23456789TJQKA"
SUIT_CHARS = "SHDC"

# Tie-break values stay below this, so the category always dominates
CATEGORY_WEIGHT = 1_000_000


def char_to_val(c: str) -> Val:
    """Parse a card value character (2-9, T, J, Q, K, A)."""
    if len(c) != 1 or c not in VAL_CHARS:
        raise DomainError("char_to_val", c, f"one of {VAL_CHARS!r}")
    return Val(VAL_CHARS.index(c) + 2)


def char_to_suit(c: str) -> Suit:
    """Parse a suit character (S, H, D, C)."""
    if len(c) != 1 or c not in SUIT_CHARS:
        raise DomainError("char_to_suit", c, f"one of {SUIT_CHARS!r}")
    return Suit(SUIT_CHARS.index(c))


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card, ordered by value then suit."""
    val: Val
    suit: Suit

    def __str__(self) -> str:
        return f"{VAL_CHARS[self.val - 2]}{SUIT_CHARS[self.suit]}"

    def same_suit(self, other: "Card") -> bool:
        return self.suit == other.suit

    def next_val(self) -> Val:
        """Value that follows this card's value; Ace wraps to Two."""
        if self.val == Val.ACE:
            return Val.TWO
        return Val(self.val + 1)


def parse_card(code: str) -> Card:
    """Parse a two character card code such as ``"TH"`` (ten of hearts)."""
    if len(code) != 2:
        raise DomainError("parse_card", code, "a two character card code")
    return Card(char_to_val(code[0]), char_to_suit(code[1]))


def _show(cards: Sequence[Card]) -> str:
    return "[" + ", ".join(str(c) for c in cards) + "]"


def _weigh(vals: Sequence[int]) -> int:
    # lowest value gets weight 1, the highest 14 ** (len - 1)
    res = 0
    mult = 1
    for v in vals:
        res += mult * v
        mult *= 14
    return res


@dataclass(frozen=True)
class Hand:
    """A five card poker hand. Cards are kept sorted ascending."""
    cards: Tuple[Card, ...]

    def __post_init__(self):
        if len(self.cards) != 5:
            raise DomainError("Hand", len(self.cards), "exactly 5 cards")
        if len(set(self.cards)) != 5:
            raise DomainError("Hand", " ".join(str(c) for c in self.cards), "five distinct cards")
        object.__setattr__(self, "cards", tuple(sorted(self.cards)))

    def show(self) -> str:
        return _show(self.cards)

    def group(self) -> List[List[Card]]:
        """Group cards of equal value, groups in ascending value order."""
        groups: List[List[Card]] = []
        for card in self.cards:
            if groups and groups[-1][-1].val == card.val:
                groups[-1].append(card)
            else:
                groups.append([card])
        return groups

    def _group_sizes(self) -> List[int]:
        return [len(g) for g in self.group()]

    def _is_ace_low(self) -> bool:
        return [c.val for c in self.cards] == [2, 3, 4, 5, 14]

    def _straight_vals(self) -> List[int]:
        if self._is_ace_low():
            return [1, 2, 3, 4, 5]
        return [c.val for c in self.cards]

    def is_flush(self) -> bool:
        first = self.cards[0]
        return all(first.same_suit(c) for c in self.cards[1:])

    def is_straight(self) -> bool:
        """Five consecutive values; A-2-3-4-5 counts with the Ace low."""
        if self._is_ace_low():
            return True
        return all(
            prev.val != Val.ACE and nxt.val == prev.next_val()
            for prev, nxt in zip(self.cards, self.cards[1:])
        )

    def is_straight_flush(self) -> bool:
        return self.is_flush() and self.is_straight()

    def is_pair(self) -> bool:
        return 2 in self._group_sizes()

    def is_2_pair(self) -> bool:
        return self._group_sizes().count(2) == 2

    def is_3_of_kind(self) -> bool:
        return 3 in self._group_sizes()

    def is_4_of_kind(self) -> bool:
        return 4 in self._group_sizes()

    def is_full_house(self) -> bool:
        return self.is_pair() and self.is_3_of_kind()

    def is_high_card(self) -> bool:
        return len(self.group()) == 5

    def value_high_card(self) -> int:
        """Tie-break value comparing cards from the highest down."""
        return _weigh(self._straight_vals() if self.is_straight() else [c.val for c in self.cards])

    def value_pair(self) -> int:
        """Tie-break value of a one pair hand: pair first, then kickers."""
        pair = next(g[0].val for g in self.group() if len(g) == 2)
        kickers = [c.val for c in self.cards if c.val != pair]
        return 14 ** 3 * pair + _weigh(kickers)

    def value_2_pair(self) -> int:
        """Tie-break value of a two pair hand: high pair, low pair, kicker."""
        groups = self.group()
        low, high = [g[0].val for g in groups if len(g) == 2]
        kicker = next(g[0].val for g in groups if len(g) == 1)
        return 14 * 14 * high + 14 * low + kicker

    def category(self) -> Category:
        if self.is_straight_flush():
            return Category.STRAIGHT_FLUSH
        if self.is_4_of_kind():
            return Category.FOUR_OF_A_KIND
        if self.is_full_house():
            return Category.FULL_HOUSE
        if self.is_flush():
            return Category.FLUSH
        if self.is_straight():
            return Category.STRAIGHT
        if self.is_3_of_kind():
            return Category.THREE_OF_A_KIND
        if self.is_2_pair():
            return Category.TWO_PAIR
        if self.is_pair():
            return Category.PAIR
        return Category.HIGH_CARD

    def get_rank(self) -> int:
        """Return a number that orders hands by strength; higher wins.

        Equal ranks mean a tie.
        """
        category = self.category()
        if category in (Category.FOUR_OF_A_KIND, Category.FULL_HOUSE, Category.THREE_OF_A_KIND):
            # middle card of a sorted hand always belongs to the largest group
            value = self.cards[2].val
        elif category == Category.TWO_PAIR:
            value = self.value_2_pair()
        elif category == Category.PAIR:
            value = self.value_pair()
        else:
            value = self.value_high_card()
        return category * CATEGORY_WEIGHT + value


def parse_hand(text: str) -> Hand:
    """Parse five space separated card codes, e.g. ``"8C TS KC 9H 4S"``."""
    return Hand(tuple(parse_card(code) for code in text.split()))


def show_grp(groups: Sequence[Sequence[Card]]) -> str:
    """Render grouped cards, one group per line."""
    return "".join(_show(g) + "\n" for g in groups)
