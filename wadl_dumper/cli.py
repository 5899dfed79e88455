from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from .errors import MissingInputError, WadlUserError
from .extractor import dump
from .types import RunOptions, parse_placeholders
from .version import tool_version
from .xml import load_document

USAGE = "\n".join([
    "Usage:",
    "  wadl-dumper -i http://domain.tld/application.wadl [options...]",
    "  wadl-dumper -i /path/to/wadl.xml --show-base -r \"-alert(1)-\"",
    "  wadl-dumper -i /path/to/wadl.xml -p slug=myslug -p projectId=test123",
    "",
    "Options:",
    "  -i, --input <URL/FILE>         URL/path to WADL file",
    "  -b, --show-base                Add base URL to paths",
    "  -r, --replace <string>         Replace all unspecified placeholders with given value",
    "  -p, --placeholder <name=value> Replace specific placeholder with given value (can be used multiple times)",
    "  -h, --help                     Show its help text",
    "",
])


class _Parser(argparse.ArgumentParser):
    # Help goes to stderr, stdout is reserved for paths
    def print_help(self, file: Optional[TextIO] = None) -> None:
        (file or sys.stderr).write(USAGE)


def _build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="wadl-dumper", add_help=False)
    p.add_argument("-h", "--help", action="help", default=argparse.SUPPRESS)
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-i", "--input", default="", metavar="URL/FILE")
    p.add_argument("-b", "--show-base", action="store_true")
    p.add_argument("-r", "--replace", default=None, metavar="STRING")
    p.add_argument("-p", "--placeholder", action="append", default=[], metavar="NAME=VALUE")
    p.add_argument("--timeout", type=float, default=30.0, help="HTTP fetch timeout, seconds")
    p.add_argument("--debug", action="store_true", help="debug logging to stderr")
    return p


# Options that always consume the next token, even one starting with "-"
_VALUE_FLAGS = frozenset({"-i", "--input", "-r", "--replace", "-p", "--placeholder", "--timeout"})


def _attach_values(argv: list[str]) -> list[str]:
    """Rewrites "-r -x" as "-r=-x" so payload values are not taken for options."""
    out: list[str] = []
    it = iter(argv)
    for arg in it:
        if arg in _VALUE_FLAGS:
            value = next(it, None)
            out.append(arg if value is None else f"{arg}={value}")
        else:
            out.append(arg)
    return out


def _setup_logging(debug: bool) -> None:
    log = logging.getLogger("wadl_dumper")
    log.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _opts(ns: argparse.Namespace) -> RunOptions:
    if not ns.input:
        raise MissingInputError()
    return RunOptions(
        input_source=ns.input,
        show_base=bool(ns.show_base),
        default_replacement=ns.replace,
        placeholders=parse_placeholders(ns.placeholder),
        timeout=ns.timeout,
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ns = _build_parser().parse_args(_attach_values(argv))
    _setup_logging(ns.debug)

    try:
        options = _opts(ns)
        tree = load_document(options.input_source, timeout=options.timeout)
        dump(tree, options, sys.stdout)
    except WadlUserError as e:
        sys.stderr.write(f"Error! {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
