"""App: central object that wires together the deck, register, settings and tools."""

import pathlib

from pdfsr.bulk import add_timestamps, import_dir, strip_timestamps
from pdfsr.codec import decode, encode, is_card_name
from pdfsr.config import as_bool, load_settings
from pdfsr.errors import CollisionError
from pdfsr.models import Flashcard, Outcome, Policy, ReviewResult
from pdfsr.register import ActiveRegister
from pdfsr.report import print_schedule
from pdfsr.review import record_outcome
from pdfsr.scheduler import now, select_next
from pdfsr.store import FileStore
from pdfsr.tools import CommandViewer, LatexBuilder


class App:
    """Holds all shared state for one pdfsr invocation.

    Usage:
        app = App(root="/path/to/deck")
        card = app.query(Policy.EXPIRED_FIRST)
        result = app.review(Outcome.HIT)

    For testing:
        app = App(store=MemoryStore(...), settings={}, viewer=FakeViewer())
    """

    def __init__(self, root: pathlib.Path | str | None = None, store=None,
                 settings: dict | None = None, viewer=None, builder=None):
        if store is None:
            store = FileStore(pathlib.Path.cwd() if root is None else root)
        self.store = store
        self.settings = load_settings() if settings is None else settings
        self.register = ActiveRegister(store)
        self.viewer = viewer or CommandViewer(self.settings.get("viewer", "xdg-open"))
        self.builder = builder or LatexBuilder(
            self.settings.get("latex", "pdflatex -interaction=nonstopmode"))

    def query(self, policy: Policy, at: int | None = None) -> Flashcard | None:
        """Select the next card, register it and show it.

        A registered card that still exists is shown again instead.
        """
        active = self.register.get()
        if active is not None and is_card_name(active):
            card = decode(active)
        else:
            fallback = as_bool(self.settings.get("new_first_fallback", True)) is not False
            card = select_next(self.store, policy, at, new_first_fallback=fallback)
            if card is None:
                if self.register.raw() is not None:
                    self.register.clear()
                return None
            self.register.set(card.name)
        self.viewer.show(self.store.path(card.name))
        return card

    def review(self, outcome: Outcome, at: int | None = None) -> ReviewResult:
        return record_outcome(self.store, self.register, outcome, at)

    def print_schedule(self, at: int | None = None) -> int:
        return print_schedule(self.store, now() if at is None else at)

    def add_timestamps(self) -> list[str]:
        return add_timestamps(self.store)

    def strip_timestamps(self) -> list[str]:
        return strip_timestamps(self.store, self.register)

    def import_dir(self, source, keep_timestamps: bool = False) -> list[str]:
        return import_dir(self.store, source, keep_timestamps)

    def typeset(self, source: pathlib.Path | str) -> str:
        """Build a .tex file and add the PDF to the deck as a new card."""
        pdf = self.builder.build(pathlib.Path(source))
        name = encode(0, 0, pdf.name)
        if self.store.exists(name):
            raise CollisionError(pdf.name, name)
        try:
            if pdf.parent == pathlib.Path(self.store.path(name)).parent.resolve():
                # built inside the deck: stamp it in place
                self.store.rename(pdf.name, name)
            else:
                self.store.copy_in(pdf, name)
        except FileExistsError:
            raise CollisionError(pdf.name, name)
        return name
