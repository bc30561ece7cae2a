"""Shared data classes used across pdfsr."""

import enum
from dataclasses import dataclass


class Outcome(enum.Enum):
    HIT = "hit"
    MISS = "miss"


class Policy(enum.Enum):
    NEW_FIRST = "new_first"
    EXPIRED_FIRST = "expired_first"


@dataclass(frozen=True)
class Flashcard:
    """Schedule state of one card, as carried by its filename.

    awake is when the card is due again, sleep is when it was last
    reviewed. Both are 0 for a card that has never been scheduled.
    """
    awake: int
    sleep: int
    title: str

    @property
    def is_new(self) -> bool:
        return self.awake == 0 and self.sleep == 0

    @property
    def learn_time(self) -> int:
        return self.awake - self.sleep

    @property
    def name(self) -> str:
        from pdfsr.codec import encode
        return encode(self.awake, self.sleep, self.title)


@dataclass
class ReviewResult:
    old_name: str
    new_name: str
    outcome: Outcome
    elapsed: int | None
    interval: int
