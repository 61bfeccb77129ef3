#!/usr/bin/env python3
"""Replay a sequence of rolls and report the resulting bowling score."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVEL
from .exceptions import DomainException
from .schemas import GameSummaryOut
from .scoring.bowling import Game
from .services.validation import validate_pins
from .utils.sentry import init_sentry

logger = logging.getLogger(__name__)


def play(rolls: List[str]) -> Game:
    game = Game()
    for raw in rolls:
        game.roll(validate_pins(raw))
    return game


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tenpin-score",
        description=(
            "Record each roll in order and print the frame-by-frame game state "
            "followed by the total score."
        ),
    )
    parser.add_argument(
        "rolls",
        nargs="*",
        help="Pins knocked down by each roll, in the order they were bowled",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the game summary (or the error) as JSON.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL)
    init_sentry()

    try:
        game = play(args.rolls)
    except DomainException as exc:
        logger.warning("Rejected input: %s", exc)
        if args.json:
            print(exc.to_problem().model_dump_json(), file=sys.stderr)
        else:
            print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        summary = GameSummaryOut.model_validate(game.summary())
        print(json.dumps(summary.model_dump(by_alias=True), indent=2))
        return 0

    print(game.game_state())
    if game.is_over:
        status = "final"
    else:
        status = f"frame {game.current_frame}, roll {game.current_roll}"
    print(f"Score: {game.score()} ({status})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
