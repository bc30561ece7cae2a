"""Shared test fixtures."""

import pytest

from pdfsr.app import App
from pdfsr.register import ActiveRegister
from pdfsr.store import FileStore, MemoryStore


class FakeViewer:
    def __init__(self):
        self.shown = []

    def show(self, path):
        self.shown.append(path)


@pytest.fixture
def deck(tmp_path):
    """Empty deck directory."""
    d = tmp_path / "deck"
    d.mkdir()
    return d


@pytest.fixture
def file_store(deck):
    return FileStore(deck)


@pytest.fixture
def mem_store():
    return MemoryStore()


@pytest.fixture
def register(mem_store):
    return ActiveRegister(mem_store)


@pytest.fixture
def viewer():
    return FakeViewer()


@pytest.fixture
def app(deck, viewer):
    """App on a real tmp deck with default settings and a fake viewer."""
    return App(root=deck, settings={"new_first_fallback": True}, viewer=viewer)
