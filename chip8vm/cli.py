"""Command-line entry point"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from .config import EmulatorConfig
from .errors import Chip8Error
from .frontend import Chip8Window
from .interpreter import Interpreter
from .rom import read_rom

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chip8vm",
        description="CHIP-8 interpreter with an amber 64x32 display")
    parser.add_argument("rom", help="Path to CHIP-8 ROM")
    parser.add_argument("--rate", type=int, default=None,
                        help="Instructions per second (1-65535, default 500)")
    parser.add_argument("--config", type=Path, default=None,
                        help="JSON file with emulator settings")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the CXNN random source")
    parser.add_argument("--scale", type=int, default=None,
                        help="Window pixels per CHIP-8 pixel")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Trace every instruction")
    return parser


def load_config(args: argparse.Namespace) -> EmulatorConfig:
    config = EmulatorConfig.from_json(args.config) if args.config else EmulatorConfig()
    return config.override(instruction_rate=args.rate, seed=args.seed, scale=args.scale)


def create_interpreter(config: EmulatorConfig) -> Interpreter:
    return Interpreter(rate=config.instruction_rate,
                       rng=random.Random(config.seed),
                       stack_limit=config.stack_limit)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s]:  %(message)s", stream=sys.stdout)

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        logger.error("Bad configuration: %s", e)
        return 2

    try:
        interpreter = create_interpreter(config)
        error = interpreter.load_program(read_rom(args.rom))
        if error is not None:
            raise error

        window = Chip8Window(interpreter, config.scale, title=f"CHIP-8 - {Path(args.rom).stem}")
        error = window.run()
        if error is not None:
            raise error
    except Chip8Error as e:
        logger.error("%s: %s", e.kind.value, e)
        return 1

    return 0
