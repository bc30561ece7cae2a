"""Exceptions raised by pdfsr operations."""


class PdfsrError(Exception):
    """Base class for every failure reported to the user."""


class NoActiveCard(PdfsrError):
    def __init__(self):
        super().__init__("No active card. Run with -q or -Q first.")


class MissingFile(PdfsrError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Active card no longer exists: {name}")


class MalformedName(PdfsrError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Not a flashcard filename: {name}")


class CollisionError(PdfsrError):
    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Cannot rename {source}: {target} already exists")


class RenameError(PdfsrError):
    def __init__(self, source: str, target: str, reason: str = ""):
        self.source = source
        self.target = target
        msg = f"Failed to rename {source} to {target}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InvalidDirectory(PdfsrError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Not a directory: {path}")


class BuildError(PdfsrError):
    pass
