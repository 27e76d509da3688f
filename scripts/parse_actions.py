#!/usr/bin/env python
"""
Parse action strings and print the resulting trigger -> commands map as JSON.

Usage:
    python scripts/parse_actions.py "create color red, solid off"
    python scripts/parse_actions.py --file actions.txt      # one action string per line
    echo "bump teleport 1N 2W" | python scripts/parse_actions.py
    python scripts/parse_actions.py --debug "create color red; oops"
"""

import argparse
import json
import logging
import sys

from aw_action.parser import ActionParser


def read_action_strings(args):
    if args.actions:
        return args.actions
    if args.file:
        with open(args.file, encoding="utf-8") as fh:
            return [line.rstrip("\n") for line in fh if line.strip()]
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def main():
    parser = argparse.ArgumentParser(
        description="Parse object action strings into JSON"
    )
    parser.add_argument(
        "actions", nargs="*",
        help="Action strings to parse (default: read stdin)",
    )
    parser.add_argument(
        "--file", type=str, default=None,
        help="Read action strings from a file, one per line",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Print the grammar diagnostic instead of the parse result",
    )
    parser.add_argument(
        "--indent", type=int, default=2,
        help="JSON indentation (default: 2)",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log discarded commands to stderr",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    action_parser = ActionParser()
    failed = False
    for text in read_action_strings(args):
        if args.debug:
            message = action_parser.debug(text)
            print(message or "OK")
            failed = failed or bool(message)
        else:
            print(json.dumps(action_parser.parse(text), indent=args.indent))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
