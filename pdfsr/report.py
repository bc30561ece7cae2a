"""Schedule report: human-readable listing of timestamped cards."""

from pdfsr.messages import info
from pdfsr.scanner import timestamped_candidates

_UNITS = [("d", 86400), ("h", 3600), ("m", 60), ("s", 1)]


def format_duration(seconds: int) -> str:
    """Largest two units of a duration, e.g. '3d 4h' or '12m 5s'."""
    seconds = abs(int(seconds))
    parts = []
    for label, size in _UNITS:
        count, seconds = divmod(seconds, size)
        if count or parts:
            parts.append(f"{count}{label}")
        if len(parts) == 2:
            break
    if not parts:
        return "0s"
    if parts[-1].startswith("0") and len(parts) > 1:
        parts.pop()
    return " ".join(parts)


def schedule_rows(store, at: int) -> list[dict]:
    rows = []
    for card in sorted(timestamped_candidates(store), key=lambda c: (c.awake, c.name)):
        rows.append({
            "name": card.name,
            "title": card.title,
            "remaining": card.awake - at,
            "elapsed": at - card.sleep if card.sleep else None,
        })
    return rows


def format_row(row: dict) -> str:
    if row["remaining"] > 0:
        due = f"due in {format_duration(row['remaining'])}"
    elif row["remaining"] == 0:
        due = "due now"
    else:
        due = f"overdue {format_duration(row['remaining'])}"
    if row["elapsed"] is None:
        seen = "never reviewed"
    else:
        seen = f"reviewed {format_duration(row['elapsed'])} ago"
    return f"{due:<20} {seen:<24} {row['title']}"


def print_schedule(store, at: int) -> int:
    rows = schedule_rows(store, at)
    for row in rows:
        info(format_row(row))
    return len(rows)
