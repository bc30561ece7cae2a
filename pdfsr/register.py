"""Active-card register: a one-line marker naming the card under review."""

ACTIVE_MARKER = ".pdfsr-active"


class ActiveRegister:
    def __init__(self, store, marker: str = ACTIVE_MARKER):
        self.store = store
        self.marker = marker

    def raw(self) -> str | None:
        """The registered name, whether or not the file still exists."""
        text = self.store.read_text(self.marker)
        if not text:
            return None
        lines = text.splitlines()
        name = lines[0].strip() if lines else ""
        return name or None

    def get(self) -> str | None:
        name = self.raw()
        if name is None or not self.store.exists(name):
            return None
        return name

    def set(self, name: str | None):
        self.store.write_text(self.marker, f"{name}\n" if name else "")

    def clear(self):
        self.set(None)
