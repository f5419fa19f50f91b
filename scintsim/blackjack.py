"""A simple game of blackjack against the dealer, played on the console."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, MutableSequence, Optional, Sequence

DECK_SIZE = 52
DEALER_STANDS_AT = 17
BLACKJACK = 21


class Suit(IntEnum):
    CLUBS = 0
    SPADES = 1
    DIAMONDS = 2
    HEARTS = 3

    @property
    def letter(self) -> str:
        return "CSDH"[self.value]


class Rank(IntEnum):
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

    @property
    def label(self) -> str:
        if self >= Rank.JACK:
            return "JQKA"[self - Rank.JACK]
        return str(self.value + 2)


@dataclass(frozen=True)
class Card:
    """A playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.letter}"

    def value(self) -> int:
        """Points the card scores; every picture card and the ace count ten."""
        return min(self.rank.value + 2, 10)


def new_deck() -> List[Card]:
    """All 52 cards, ordered by rank and then by suit."""
    return [Card(rank, suit) for rank in Rank for suit in Suit]


def shuffle_deck(deck: MutableSequence[Card], rng: Optional[random.Random] = None) -> None:
    """Shuffle in place by swapping each position with a random one."""
    rng = rng if rng is not None else random.Random()
    last = len(deck) - 1
    for index in range(len(deck)):
        other = rng.randint(0, last)
        deck[index], deck[other] = deck[other], deck[index]


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line


def _read_int(read: Callable[[], str]) -> Optional[int]:
    try:
        return int(read().strip())
    except ValueError:
        return None


def play_blackjack(
    deck: Sequence[Card],
    read: Callable[[], str] = _read_line,
    write: Callable[[str], object] = sys.stdout.write,
) -> bool:
    """Play one round from the top of ``deck``; True if the player wins.

    ``read`` returns one line of player input and ``write`` shows text.
    """
    cards = iter(deck)
    first, second, dealer_card = next(cards), next(cards), next(cards)
    player_score = first.value() + second.value()
    dealer_score = dealer_card.value()
    write(f"You have been dealt a {first} and a {second}\n")
    write(f"The dealer has been dealt a {dealer_card}\n")
    write(f"Your score is: {player_score}\n")
    write(f"The dealer's score is: {dealer_score}\n")

    while True:
        write("Enter 0 to hit or 1 to stand\n")
        turn = _read_int(read)
        if turn == 0:
            player_score += next(cards).value()
            write(f"Your score is: {player_score}\n")
            if player_score > BLACKJACK:
                return False
        elif turn == 1:
            write(f"Your final score is: {player_score}\n")
            break
        else:
            write("Invalid input")

    while dealer_score < DEALER_STANDS_AT:
        dealer_score += next(cards).value()
        write(f"Dealer score is now: {dealer_score}\n")
    write(f"Dealer's final score is: {dealer_score}\n")
    return player_score > dealer_score or dealer_score > BLACKJACK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play rounds until the player chooses to stop."""
    parser = argparse.ArgumentParser(prog="scintsim-blackjack", description="Play blackjack.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    deck = new_deck()
    write = sys.stdout.write
    play = 1
    try:
        while play == 1:
            shuffle_deck(deck, rng)
            won = play_blackjack(deck, _read_line, write)
            write("You won\n" if won else "You lost\n")
            write("Would you like to play again? Enter (1) if yes or (0) to exit: ")
            sys.stdout.flush()
            play = _read_int(_read_line)
    except EOFError:
        pass
    return 0