"""CLI entry point for mates."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from mates import __version__
from mates.config import Configuration
from mates.contacts import add_contact_from_email, generate, write_create
from mates.edit import edit_contact
from mates.errors import MatesError
from mates.query import search, to_email_display, to_file_paths, to_mutt_lines
from mates.storage import IndexStore

logger = logging.getLogger(__name__)


def build_index(config: Configuration) -> None:
    """Rewrite the index from the contact directory."""
    logger.info(f'Rebuilding index file "{config.index_path}"...')
    IndexStore(config.index_path).build_full(config.vdir_path)


def _print_lines(lines: list[str]) -> None:
    # Built completely before printing so a failure never leaves partial output
    if lines:
        sys.stdout.write("\n".join(lines) + "\n")


def mutt_query(config: Configuration, query: str, disable_empty_line: bool = False) -> None:
    """Search for contacts, output usable for mutt's query_command."""
    records = search(IndexStore(config.index_path).load(), query)
    _print_lines(to_mutt_lines(records, suppress_leading_blank=disable_empty_line))


def file_query(config: Configuration, query: str) -> None:
    """Search for contacts, print just their file paths."""
    records = search(IndexStore(config.index_path).load(), query)
    _print_lines(to_file_paths(records))


def email_query(config: Configuration, query: str) -> None:
    """Search for contacts, print "name <email>"."""
    records = search(IndexStore(config.index_path).load(), query)
    _print_lines(to_email_display(records))


def add(config: Configuration, email: str, fullname: Optional[str] = None) -> None:
    """Manually add a contact's email and full name."""
    store = IndexStore(config.index_path)
    store.ensure_exists()
    record = generate(fullname, email, config.vdir_path)
    write_create(record)
    store.append_one(record)
    print(record.path)


def add_email(config: Configuration, raw_message: str) -> None:
    """Add the sender of a raw message to the contacts."""
    store = IndexStore(config.index_path)
    store.ensure_exists()
    record = add_contact_from_email(config.vdir_path, raw_message)
    store.append_one(record)
    print(record.path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mates",
        description="mates - a very simple commandline addressbook",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report skipped contact files and other details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("index", help="Rewrite/create the index")

    mutt_parser = subparsers.add_parser(
        "mutt-query",
        help="Search for contact, output is usable for mutt's query_command",
    )
    mutt_parser.add_argument(
        "--disable-empty-line",
        action="store_true",
        help="Disable printing an empty first line",
    )
    mutt_parser.add_argument("query")

    file_parser = subparsers.add_parser(
        "file-query",
        help="Search for contact, return just the filename",
    )
    file_parser.add_argument("query")

    email_parser = subparsers.add_parser(
        "email-query",
        help='Search for contact, return "name <email>"',
    )
    email_parser.add_argument("query")

    add_parser = subparsers.add_parser(
        "add",
        help="Manually add a contact's email and full name",
    )
    add_parser.add_argument("email")
    add_parser.add_argument("fullname", nargs="?")

    subparsers.add_parser(
        "add-email",
        help="Take mail from stdin, add sender to contacts. Print filename",
    )

    edit_parser = subparsers.add_parser(
        "edit",
        help="Open contact (given by filepath or search-string) interactively",
    )
    edit_parser.add_argument("file_or_query", metavar="file-or-query")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )
    load_dotenv()

    try:
        config = Configuration.from_env()

        if args.command == "index":
            build_index(config)
        elif args.command == "mutt-query":
            mutt_query(config, args.query, args.disable_empty_line)
        elif args.command == "file-query":
            file_query(config, args.query)
        elif args.command == "email-query":
            email_query(config, args.query)
        elif args.command == "add":
            add(config, args.email, args.fullname)
        elif args.command == "add-email":
            add_email(config, sys.stdin.read())
        elif args.command == "edit":
            edit_contact(config, args.file_or_query)
    except MatesError as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
