"""Scheduler: pick the next card to show and compute when a reviewed card
is due again.

All times are integer seconds since EPOCH. EPOCH is raw Unix time and must
not change once a deck has timestamped cards, since every stored awake/sleep
pair is compared against now() on the same scale.
"""

import time

from pdfsr.models import Flashcard, Outcome, Policy
from pdfsr.scanner import new_candidates, timestamped_candidates

EPOCH = 0

FIRST_HIT_DELAY = 90
MISS_DELAY = 60
GROWTH_NUM, GROWTH_DEN = 5, 4  # 1.25


def now() -> int:
    return int(time.time()) - EPOCH


def learn_time(card: Flashcard) -> int:
    return card.awake - card.sleep


def _expired_key(card: Flashcard):
    return (learn_time(card), card.sleep, card.name)


def next_new(store) -> Flashcard | None:
    return next(new_candidates(store), None)


def next_expired(store, at: int) -> Flashcard | None:
    """Due card with the shortest learn time; older review wins ties."""
    due = [c for c in timestamped_candidates(store) if c.awake <= at]
    if not due:
        return None
    return min(due, key=_expired_key)


def select_next(store, policy: Policy, at: int | None = None,
                new_first_fallback: bool = True) -> Flashcard | None:
    """Return the card to present next, or None when nothing is eligible.

    NEW_FIRST only falls back to the expired search when
    new_first_fallback is set. EXPIRED_FIRST always falls back to new cards.
    """
    if at is None:
        at = now()
    if policy is Policy.NEW_FIRST:
        card = next_new(store)
        if card is None and new_first_fallback:
            card = next_expired(store, at)
        return card
    card = next_expired(store, at)
    if card is None:
        card = next_new(store)
    return card


def _grow(gap: int) -> int:
    # round(1.25 * gap), halves rounded up
    return (GROWTH_NUM * gap * 2 + GROWTH_DEN) // (GROWTH_DEN * 2)


def compute_next_awake(outcome: Outcome, at: int, awake: int, sleep: int) -> int:
    if outcome is Outcome.MISS:
        return at + MISS_DELAY
    if awake == 0 or sleep == 0:
        return at + FIRST_HIT_DELAY
    # a clock that went backwards would otherwise schedule into the past
    gap = max(at - sleep, 0)
    return at + _grow(gap)
