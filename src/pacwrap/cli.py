# cli.py
import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from . import __version__
from .config import Config
from .dispatch import Request, dispatch
from .errors import (
    PacwrapError,
    ProcessExitFailure,
    ProcessSpawnFailure,
    PromptCanceled,
    UnrecognizedOperation,
)
from .executor import SPAWN_FAILURE_CODE
from .logger import set_level, setup_logger
from .pm import compat_table
from .printer import PROMPT_CANCELED, print_cmd, print_err, print_msg

_logger = setup_logger()

# Sub-flags shared by the operations; which ones are valid for which
# operation is decided by the dispatcher's flag tables.
SUB_FLAGS = (
    ("c", ["--changelog", "--clean"], "Q: view the changelog; S: clean the cache (repeatable)"),
    ("e", ["--explicit"], "Q: only explicitly installed packages"),
    ("g", ["--groups"], "S: display the members of a group"),
    ("i", ["--info"], "Q/S: display package information (repeatable)"),
    ("k", ["--check"], "Q: check the files owned by a package"),
    ("l", ["--list"], "Q: list files of a package; S: list packages of a repository"),
    ("m", ["--foreign"], "Q: packages not found in the sync databases"),
    ("n", ["--nosave"], "R: ignore file backup designations"),
    ("o", ["--owns"], "Q: find the package owning a file"),
    ("p", ["--file"], "Q: query a package file; R/S/U: only print the targets"),
    ("s", ["--search", "--recursive"], "Q/S: search; R: remove unneeded dependencies (repeatable)"),
    ("u", ["--upgrades", "--sysupgrade"], "Q: out-of-date packages; S: upgrade installed packages"),
    ("w", ["--downloadonly"], "S: download packages without installing"),
    ("y", ["--refresh"], "S: refresh the package databases"),
)


def split_extra_flags(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Everything after the first ``--`` goes to the backend verbatim."""
    argv = list(argv)
    if "--" in argv:
        idx = argv.index("--")
        return argv[:idx], argv[idx + 1:]
    return argv, []


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pacwrap",
        description="Pacman-like syntax wrapper for many package managers",
        epilog="Extra flags for the package manager go after `--`, eg. `pacwrap -S curl -- --proxy=host:3128`.",
    )

    ops = parser.add_mutually_exclusive_group()
    ops.add_argument("-Q", "--query", dest="operation", action="store_const", const="Q", help="Query the package database")
    ops.add_argument("-R", "--remove", dest="operation", action="store_const", const="R", help="Remove package(s)")
    ops.add_argument("-S", "--sync", dest="operation", action="store_const", const="S", help="Synchronize packages")
    ops.add_argument(
        "-U", "--update", dest="operation", action="store_const", const="U", help="Upgrade or add local package file(s)"
    )

    sub = parser.add_argument_group("operation flags")
    for letter, longs, help_text in SUB_FLAGS:
        sub.add_argument(f"-{letter}", *longs, dest=letter, action="count", default=0, help=help_text)
    sub.add_argument("--print", dest="print_only", action="count", default=0, help="R/S/U: same as -p, only print the targets")

    parser.add_argument(
        "--using", "--pm", "--package-manager", dest="using", metavar="PM", help="Package manager to invoke"
    )
    parser.add_argument("--dry-run", "--dryrun", dest="dry_run", action="store_true", help="Perform a dry run")
    parser.add_argument("--needed", action="store_true", help="Prevent reinstalling installed packages")
    parser.add_argument(
        "--no-confirm", "--noconfirm", "--yes", dest="no_confirm", action="store_true", help="Answer yes to every question"
    )
    parser.add_argument("--no-cache", "--nocache", dest="no_cache", action="store_true", help="Remove cache after installation")
    parser.add_argument("--compat-table", action="store_true", help="Show which operations each package manager supports")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("keywords", nargs="*", metavar="KEYWORDS", help="Package names or (sometimes) patterns")
    return parser


def parse_request(argv: Sequence[str]) -> Tuple[argparse.Namespace, Request]:
    args_part, extra_flags = split_extra_flags(argv)
    parser = build_parser()
    args = parser.parse_intermixed_args(args_part)
    if args.operation is None and not args.compat_table:
        parser.error("one of the operations -Q -R -S -U is required")

    flags = {}
    if args.operation:
        # Collect every sub-flag that was given, valid for this operation or not.
        for letter, _, _ in SUB_FLAGS:
            count = getattr(args, letter)
            if count:
                flags[letter] = count
        if args.print_only:
            # Under -Q, -p is --file, not a preview.
            if args.operation == "Q":
                parser.error("--print is not valid with -Q (use -p/--file to query a package file)")
            flags["p"] = flags.get("p", 0) + args.print_only
    request = Request(
        operation=args.operation or "",
        flags=flags,
        keywords=list(args.keywords),
        extra_flags=extra_flags,
    )
    return args, request


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        args, request = parse_request(argv)
        if args.verbose:
            set_level(logging.DEBUG)

        if args.compat_table:
            print(compat_table())
            return 0

        config = Config.load().merge(
            dry_run=args.dry_run,
            needed=args.needed,
            no_confirm=args.no_confirm,
            no_cache=args.no_cache,
            using=args.using,
        )
        return dispatch(request, config)

    except PromptCanceled as e:
        if e.cmd is not None:
            print_cmd(e.cmd, PROMPT_CANCELED)
        else:
            print_msg("", PROMPT_CANCELED)
        return 0
    except ProcessExitFailure as e:
        print_err(e)
        return e.code
    except ProcessSpawnFailure as e:
        print_err(e)
        return SPAWN_FAILURE_CODE
    except UnrecognizedOperation as e:
        print_err(e)
        return 2
    except PacwrapError as e:
        print_err(e)
        return 1
    except KeyboardInterrupt:
        _logger.warning("Terminated by user (Ctrl+C). Exiting...")
        return 130


if __name__ == "__main__":
    sys.exit(main())
