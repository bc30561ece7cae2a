"""Candidate scanning: find flashcard files in a deck and split them into
new and timestamped groups.

Names that do not match the flashcard grammar are not flashcards and are
skipped without comment.
"""

from typing import Iterator

from pdfsr.codec import decode, is_card_name
from pdfsr.models import Flashcard


def scan_cards(store) -> Iterator[Flashcard]:
    """Yield every valid flashcard in the store, in filename order."""
    for name in store.list():
        if is_card_name(name):
            yield decode(name)


def new_candidates(store) -> Iterator[Flashcard]:
    """Never-scheduled cards, smallest filename first."""
    return (card for card in scan_cards(store) if card.is_new)


def timestamped_candidates(store) -> Iterator[Flashcard]:
    return (card for card in scan_cards(store) if not card.is_new)
