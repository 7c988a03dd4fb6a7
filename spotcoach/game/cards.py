"""Card and hand representation utilities."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from treys import Card as TreysCard


class Rank(IntEnum):
    """Card ranks (0-12 where 12 is Ace)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Suit(IntEnum):
    """Card suits."""
    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    0: "2", 1: "3", 2: "4", 3: "5", 4: "6", 5: "7", 6: "8", 7: "9",
    8: "T", 9: "J", 10: "Q", 11: "K", 12: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "h", 1: "d", 2: "c", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

RANK_NAMES = {
    0: "Two", 1: "Three", 2: "Four", 3: "Five", 4: "Six", 5: "Seven",
    6: "Eight", 7: "Nine", 8: "Ten", 9: "Jack", 10: "Queen", 11: "King",
    12: "Ace",
}
SUIT_NAMES = {0: "Hearts", 1: "Diamonds", 2: "Clubs", 3: "Spades"}


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: int  # 0-12
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'."""
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


def parse_card(token: str) -> Optional[Card]:
    """
    Parse a two-character token exactly as the solver writes it.

    Only uppercase ranks and lowercase suits are recognized, so 'ah'
    or 'AH' yield None. Callers normalize user input first.
    """
    if len(token) != 2:
        return None
    rank = STR_RANK.get(token[0])
    suit = STR_SUIT.get(token[1])
    if rank is None or suit is None:
        return None
    return Card(rank, suit)


def parse_cards(text: str) -> list[Card]:
    """Parse every recognizable card from a concatenated card string."""
    full = text.replace(",", "")
    cards = []
    for i in range(0, len(full) - 1, 2):
        card = parse_card(full[i:i + 2])
        if card is not None:
            cards.append(card)
    return cards


def normalize_card(token: str) -> str:
    """Uppercase the rank and lowercase the suit of a card token."""
    rank = token[0] if len(token) > 0 else "X"
    suit = token[1] if len(token) > 1 else "x"
    return f"{rank.upper()}{suit.lower()}"


def normalize_board(raw: str) -> str:
    """
    Normalize a board fragment to comma-separated card tokens.

    Accepts 'Qs,Jh,2h', 'qs jh 2h' or 'QsJh2h'. A comma-free string of
    odd length is returned with whitespace removed but otherwise as typed.
    """
    text = raw.strip()
    if not text:
        return ""

    if "," in text:
        cards = [normalize_card(c.strip()) for c in text.split(",") if c.strip()]
        return ",".join(cards)

    cleaned = "".join(text.split())
    if len(cleaned) % 2 != 0:
        return cleaned
    return ",".join(
        normalize_card(cleaned[i:i + 2]) for i in range(0, len(cleaned), 2)
    )


def normalize_hand(raw: str) -> str:
    """Normalize a hero hand like 'ah kd' or 'Ah,Kd' to 'AhKd'."""
    cleaned = "".join(c for c in raw.strip() if not c.isspace() and c != ",")
    if len(cleaned) == 4:
        return normalize_card(cleaned[:2]) + normalize_card(cleaned[2:])
    return cleaned


def split_cards(board: str) -> list[str]:
    """Split a comma-separated board string, dropping empty tokens."""
    return [c for c in board.split(",") if c]


@dataclass
class Hand:
    """A two-card starting hand."""
    card1: Card
    card2: Card

    def __post_init__(self):
        # Ensure card1 has higher or equal rank
        if self.card1.rank < self.card2.rank:
            self.card1, self.card2 = self.card2, self.card1

    @property
    def is_pair(self) -> bool:
        """Check if hand is a pocket pair."""
        return self.card1.rank == self.card2.rank

    @property
    def is_suited(self) -> bool:
        """Check if hand is suited."""
        return self.card1.suit == self.card2.suit

    @property
    def canonical(self) -> str:
        """
        Get canonical hand notation (e.g., 'AKs', 'QQ', '72o').

        This is the notation the solver's preflop ranges are keyed by.
        """
        r1 = RANK_STR[self.card1.rank]
        r2 = RANK_STR[self.card2.rank]

        if self.is_pair:
            return f"{r1}{r2}"
        elif self.is_suited:
            return f"{r1}{r2}s"
        else:
            return f"{r1}{r2}o"

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"

    def __repr__(self) -> str:
        return f"Hand({self.card1}, {self.card2})"

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse hand from string like 'AsKh'."""
        if len(s) != 4:
            raise ValueError(f"Invalid hand string: {s}")
        return cls(Card.from_string(s[:2]), Card.from_string(s[2:]))

    def to_treys(self) -> list[int]:
        """Convert to treys library format."""
        return [self.card1.to_treys(), self.card2.to_treys()]


def generic_hand(hand_key: str) -> str:
    """Generic notation of a hand key, falling back to 'AA' if unparseable."""
    try:
        return Hand.from_string(hand_key).canonical
    except ValueError:
        return "AA"


class Deck:
    """A standard 52-card deck."""

    def __init__(self):
        self.cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self.cards = [
            Card(rank, suit)
            for rank in range(13)
            for suit in range(4)
        ]

    def remove(self, cards: list[Card]) -> None:
        """Remove specific cards from the deck."""
        for card in cards:
            if card in self.cards:
                self.cards.remove(card)

    def __len__(self) -> int:
        return len(self.cards)
