"""CLI: command-line interface for pdfsr."""

import argparse
import pathlib
import sys

from pdfsr import messages
from pdfsr.app import App
from pdfsr.errors import InvalidDirectory, PdfsrError
from pdfsr.models import Outcome, Policy
from pdfsr.report import format_duration

DESCRIPTION = """\
Spaced repetition for PDF flashcards. The schedule of each card is kept in
its filename: <awake>-<sleep>-<title>.pdf"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        messages.error(message)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="pdfsr", description=DESCRIPTION, add_help=False,
                     formatter_class=argparse.RawDescriptionHelpFormatter)
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument("-q", dest="mode", action="store_const", const="query",
                       help="show the next due card (expired first, then new)")
    modes.add_argument("-Q", dest="mode", action="store_const", const="query_new",
                       help="show the next new card (then expired, if new_first_fallback)")
    modes.add_argument("-h", dest="mode", action="store_const", const="hit",
                       help="record a hit on the active card")
    modes.add_argument("-m", dest="mode", action="store_const", const="miss",
                       help="record a miss on the active card")
    modes.add_argument("-p", dest="mode", action="store_const", const="print",
                       help="print the schedule of all timestamped cards")
    modes.add_argument("-a", dest="mode", action="store_const", const="add",
                       help="add new-card timestamps to plain PDFs")
    modes.add_argument("-r", dest="mode", action="store_const", const="strip",
                       help="remove timestamps from all cards")
    modes.add_argument("-i", dest="import_dir", metavar="DIR",
                       help="import PDFs from DIR not already in the deck")
    modes.add_argument("-I", dest="import_keep", metavar="DIR",
                       help="like -i, keeping timestamps found on imported files")
    modes.add_argument("-t", dest="typeset", metavar="FILE",
                       help="typeset a .tex FILE and add it as a new card")
    parser.add_argument("-d", dest="deck", metavar="DIR",
                        help="deck directory (default: current directory)")
    parser.add_argument("--help", action="help", help="show this help and exit")
    return parser


def cmd_query(args, app: App):
    policy = Policy.NEW_FIRST if args.mode == "query_new" else Policy.EXPIRED_FIRST
    card = app.query(policy)
    if card is None:
        messages.info("All caught up.")
        return
    messages.info(card.title)


def cmd_review(args, app: App):
    outcome = Outcome.HIT if args.mode == "hit" else Outcome.MISS
    result = app.review(outcome)
    if result.elapsed is None:
        seen = "first review"
    else:
        seen = f"after {format_duration(result.elapsed)}"
    messages.ok(f"{outcome.value.capitalize()} {seen}, "
                f"next in {format_duration(result.interval)}: {result.new_name}")


def cmd_print(args, app: App):
    if app.print_schedule() == 0:
        messages.info("No timestamped cards.")


def cmd_add(args, app: App):
    names = app.add_timestamps()
    for name in names:
        messages.info(f"Added {name}")
    messages.info(f"{len(names)} card(s) stamped")


def cmd_strip(args, app: App):
    names = app.strip_timestamps()
    for name in names:
        messages.info(f"Restored {name}")
    messages.info(f"{len(names)} card(s) unstamped")


def cmd_import(args, app: App):
    keep = args.import_keep is not None
    source = args.import_keep if keep else args.import_dir
    names = app.import_dir(pathlib.Path(source).expanduser(), keep_timestamps=keep)
    for name in names:
        messages.info(f"Imported {name}")
    messages.info(f"{len(names)} card(s) imported")


def cmd_typeset(args, app: App):
    name = app.typeset(pathlib.Path(args.typeset).expanduser())
    messages.ok(f"Added {name}")


def _command(args):
    if args.import_dir is not None or args.import_keep is not None:
        return cmd_import
    if args.typeset is not None:
        return cmd_typeset
    return {
        "query": cmd_query,
        "query_new": cmd_query,
        "hit": cmd_review,
        "miss": cmd_review,
        "print": cmd_print,
        "add": cmd_add,
        "strip": cmd_strip,
    }.get(args.mode)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    command = _command(args)
    if command is None:
        parser.print_help()
        return

    try:
        root = None
        if args.deck:
            root = pathlib.Path(args.deck).expanduser()
            if not root.is_dir():
                raise InvalidDirectory(root)
        app = App(root=root)
        command(args, app)
    except (PdfsrError, OSError) as e:
        messages.error(str(e))
        sys.exit(1)
