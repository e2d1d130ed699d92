"""Command-line entry point for lcparse, installed as the lcparse script.

    lcparse test            round-trips the reference λ-terms through parse and print_term
    lcparse parse [FILE]    parses FILE (or stdin) and prints each λ-term in canonical form
    lcparse [shell]         interactive mode
"""

import argparse

from termcolor import colored

from lcparse.lang.error import ErrorHandler
from lcparse.lang.fixtures import FIXTURES, run_all
from lcparse.lang.session import Session
from lcparse.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="lcparse", description="Parse and pretty-print untyped λ-terms.")
    parser.add_argument("command", choices=["test", "parse", "shell"], nargs="?", default="shell",
                        help="what to do (default: shell)")
    parser.add_argument("file", nargs="?", default=Session.STDIN,
                        help="file to parse with the parse command (default: stdin)")
    parser.add_argument("--tree", action="store_true", help="print syntax trees instead of canonical text")
    parser.add_argument("--lenient", action="store_true",
                        help="ignore input after a complete λ-term instead of rejecting it")
    return parser


def main(argv=None):
    """Runs lcparse. Returns the process exit status (errors exit from within ErrorHandler)."""
    args = build_parser().parse_args(argv)

    with ErrorHandler() as error_handler:
        if args.command == "test":
            run_all(FIXTURES)
            print(colored("ALL TESTS PASSED", "green", attrs=["bold"]))

        elif args.command == "parse":
            sess = Session(error_handler, args.file, strict=not args.lenient, tree=args.tree)
            sess.run()

            while sess.results:
                print(sess.pop())

        else:
            error_handler.fatal = False
            Shell(Session(error_handler, Session.SH_FILE, strict=not args.lenient, tree=args.tree)).cmdloop()

    return 0
