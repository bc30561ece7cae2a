"""Review transaction: record a hit or miss on the active card by renaming it."""

from pdfsr.codec import decode, encode
from pdfsr.errors import CollisionError, MissingFile, NoActiveCard, RenameError
from pdfsr.models import Outcome, ReviewResult
from pdfsr.scheduler import compute_next_awake, now


def record_outcome(store, register, outcome: Outcome, at: int | None = None) -> ReviewResult:
    """Reschedule the active card and clear the register.

    On any failure the card keeps its name and the register is left as it
    was, so the review can be retried.
    """
    name = register.raw()
    if name is None:
        raise NoActiveCard()
    if not store.exists(name):
        raise MissingFile(name)
    card = decode(name)

    if at is None:
        at = now()
    new_awake = compute_next_awake(outcome, at, card.awake, card.sleep)
    target = encode(new_awake, at, card.title)

    if store.exists(target):
        raise CollisionError(name, target)
    try:
        store.rename(name, target)
    except FileExistsError:
        raise CollisionError(name, target)
    except OSError as e:
        raise RenameError(name, target, str(e)) from e
    if store.exists(name) or not store.exists(target):
        raise RenameError(name, target, "source still present after rename")

    register.clear()
    elapsed = None if card.sleep == 0 else at - card.sleep
    return ReviewResult(old_name=name, new_name=target, outcome=outcome,
                        elapsed=elapsed, interval=new_awake - at)
