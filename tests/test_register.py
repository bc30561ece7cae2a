"""Tests for pdfsr.register."""

from pdfsr.register import ACTIVE_MARKER, ActiveRegister
from pdfsr.store import MemoryStore

CARD = "000000000000-000000000000-a.pdf"


def test_empty_register(register):
    assert register.get() is None
    assert register.raw() is None


def test_set_and_get(mem_store, register):
    mem_store.files[CARD] = b""
    register.set(CARD)
    assert register.get() == CARD
    assert mem_store.read_text(ACTIVE_MARKER) == CARD + "\n"


def test_clear(mem_store, register):
    mem_store.files[CARD] = b""
    register.set(CARD)
    register.clear()
    assert register.get() is None
    assert mem_store.read_text(ACTIVE_MARKER) == ""


def test_dangling_pointer_is_no_active_card(register):
    register.set(CARD)
    assert register.raw() == CARD
    assert register.get() is None


def test_only_first_line_counts(mem_store):
    mem_store.files[CARD] = b""
    mem_store.files[ACTIVE_MARKER] = f"{CARD}\nother.pdf\n".encode()
    assert ActiveRegister(mem_store).get() == CARD


def test_whitespace_marker_is_empty(mem_store):
    mem_store.files[ACTIVE_MARKER] = b"  \n"
    assert ActiveRegister(mem_store).raw() is None


def test_unreadable_marker_is_empty(mem_store):
    mem_store.files[ACTIVE_MARKER] = b"\xff\xfe"
    assert ActiveRegister(mem_store).get() is None


def test_file_backed_register(file_store, deck):
    (deck / CARD).write_bytes(b"")
    reg = ActiveRegister(file_store)
    reg.set(CARD)
    assert (deck / ACTIVE_MARKER).read_text() == CARD + "\n"
    assert ActiveRegister(file_store).get() == CARD
