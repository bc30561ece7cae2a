"""Filename codec: the only place that knows the flashcard filename grammar.

    <awake:12 digits>-<sleep:12 digits>-<title>.pdf

The title keeps its .pdf suffix, so decode(encode(a, s, t)) gives back t
unchanged.
"""

import re

from pdfsr.errors import MalformedName
from pdfsr.models import Flashcard

DIGITS = 12
MAX_STAMP = 10 ** DIGITS - 1

_CARD_RE = re.compile(r"([0-9]{12})-([0-9]{12})-([^\r\n]+\.pdf)", re.IGNORECASE)
_PDF_RE = re.compile(r"[^\r\n]+\.pdf", re.IGNORECASE)


def is_pdf(name: str) -> bool:
    return _PDF_RE.fullmatch(name) is not None


def is_card_name(name: str) -> bool:
    return _CARD_RE.fullmatch(name) is not None


def decode(name: str) -> Flashcard:
    m = _CARD_RE.fullmatch(name)
    if not m:
        raise MalformedName(name)
    return Flashcard(awake=int(m.group(1)), sleep=int(m.group(2)), title=m.group(3))


def encode(awake: int, sleep: int, title: str) -> str:
    for stamp in (awake, sleep):
        if not 0 <= stamp <= MAX_STAMP:
            raise ValueError(f"timestamp out of range: {stamp}")
    if not is_pdf(title):
        raise ValueError(f"title must end in .pdf: {title!r}")
    return f"{awake:0{DIGITS}d}-{sleep:0{DIGITS}d}-{title}"
