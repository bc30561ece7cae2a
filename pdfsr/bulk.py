"""Bulk operations over a whole deck: stamping, unstamping and importing.

A name clash on one file is a warning; the loop moves on to the next file.
"""

import pathlib

from pdfsr.codec import decode, encode, is_card_name, is_pdf
from pdfsr.errors import InvalidDirectory
from pdfsr.messages import warn
from pdfsr.store import file_digest


def _rename_all(store, pairs) -> list[str]:
    done = []
    for old, new in pairs:
        if store.exists(new):
            warn(f"{new} already exists, skipping {old}")
            continue
        try:
            store.rename(old, new)
        except FileExistsError:
            warn(f"{new} already exists, skipping {old}")
            continue
        done.append(new)
    return done


def add_timestamps(store) -> list[str]:
    """Give every plain PDF the new-card prefix. Returns the new names."""
    pairs = [(name, encode(0, 0, name)) for name in store.list()
             if is_pdf(name) and not is_card_name(name)]
    return _rename_all(store, pairs)


def strip_timestamps(store, register=None) -> list[str]:
    """Rename every card back to its bare title. Returns the bare names."""
    pairs = [(name, decode(name).title) for name in store.list() if is_card_name(name)]
    done = _rename_all(store, pairs)
    if register is not None and register.raw() is not None and register.get() is None:
        register.clear()
    return done


def import_dir(store, source: pathlib.Path | str, keep_timestamps: bool = False) -> list[str]:
    """Copy PDFs from source whose content is not already in the deck.

    Imported files get the new-card prefix, unless keep_timestamps is set
    and the remote name already carries a valid one.
    """
    source = pathlib.Path(source)
    if not source.is_dir():
        raise InvalidDirectory(source)

    known = {store.digest(name) for name in store.list() if is_pdf(name)}
    imported = []
    for path in sorted(source.iterdir()):
        if not path.is_file() or not is_pdf(path.name):
            continue
        digest = file_digest(path)
        if digest in known:
            continue
        if is_card_name(path.name):
            name = path.name if keep_timestamps else encode(0, 0, decode(path.name).title)
        else:
            name = encode(0, 0, path.name)
        if store.exists(name):
            warn(f"{name} already exists, skipping {path}")
            continue
        try:
            store.copy_in(path, name)
        except FileExistsError:
            warn(f"{name} already exists, skipping {path}")
            continue
        known.add(digest)
        imported.append(name)
    return imported
