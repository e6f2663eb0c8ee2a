"""Interactive shell over an ordered dictionary loaded from a seed file.

Usage:
    python start_shell.py [INPUT_FILE] [--log-level LEVEL]

Values default to environment variables BSTDICT_INPUT and BSTDICT_LOG_LEVEL
when set.
"""

import argparse
import logging
import os
import sys
from typing import Iterator, List

from bstdict import DictionaryError
from bstdict.shell import CommandShell, load_dictionary

PROMPT = "Enter next command: "


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    env = os.environ
    parser = argparse.ArgumentParser(description="Query an ordered dictionary")
    parser.add_argument(
        "input_file",
        nargs="?",
        default=env.get("BSTDICT_INPUT"),
        help="seed file of alternating label and data lines",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=env.get("BSTDICT_LOG_LEVEL", "WARNING"),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args(argv)
    if not args.input_file:
        parser.error("an input file is required (argument or BSTDICT_INPUT)")
    return args


def _read_commands() -> Iterator[str]:
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        dictionary = load_dictionary(args.input_file)
    except OSError as exc:
        print(f"Error reading file: {exc}")
        return 1
    except DictionaryError as exc:
        print(f"Dictionary error: {exc}")
        return 1

    CommandShell(dictionary).run(_read_commands())
    return 0


if __name__ == "__main__":
    sys.exit(main())
