"""Command-line entry point: highlight YAML piped on standard input."""

from __future__ import annotations

import sys
from typing import Sequence

from yamlglow.highlight import highlight

VERSION = "0.5.0"

_HELP = (
    "You don't really need to read this! \n"
    "Just pipe me some YAML. I don't bite\n"
    "\n"
    "Example:\n"
    "\tkubectl get myNastyPod -o yaml | yamlglow\n"
    "\n"
    "Commands:\n"
    "\thelp: get this helpful help\n"
    "\tversion: get the version"
)

_UNKNOWN = "Not really sure of what you want! Maybe try help or version."


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)

    if args:
        command = args[0]
        if command == "version":
            print(VERSION)
        elif command == "help":
            print(_HELP)
        else:
            print(_UNKNOWN)
        return 0

    try:
        result = highlight(sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1

    sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())