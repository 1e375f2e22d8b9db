from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from drop_stack.game import DropStackGame, GameError, parse_line


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="drop-stack",
        description="Read lines of placement codes (e.g. I0,I4,Q8) and print the final stack height of each.",
    )
    p.add_argument("--input", type=str, default=None, help="Read from this file instead of stdin")
    p.add_argument("--show", action="store_true", help="Print the remaining stack after each line")
    p.add_argument("--verbose", action="store_true", help="Log every placement and row clear")
    return p


def run(stream: TextIO, out: TextIO, show: bool = False) -> None:
    """Solve each line until an empty line or end of input. Errors propagate."""
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line:
            break
        game = DropStackGame()
        game.play(parse_line(line))
        logger.debug("%s -> height %d, %d lines cleared", line, game.height, game.lines_cleared_total)
        out.write(f"{game.height}\n")
        if show and game.height:
            out.write(game.grid.to_text() + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        if args.input:
            with open(args.input, encoding="utf-8") as stream:
                run(stream, sys.stdout, show=args.show)
        else:
            run(sys.stdin, sys.stdout, show=args.show)
    except GameError as exc:
        logger.error("%s", exc)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("failed to read input: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
