from __future__ import annotations
import logging
import os
from typing import Callable, Optional

from .config import demo_mode_from_env
from .errors import InputNotFoundError

logger = logging.getLogger(__name__)

INPUT_FILE = "input.txt"
DEMO_INPUT_FILE = "demo-input.txt"
DEMO_PROMPT = 'execute in "DEMO" mode? (y/n) \n'

PUZZLES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "puzzles")


def puzzle_dir(day: int) -> str:
    return os.path.join(PUZZLES_DIR, f"day{day:02d}")


def input_path(dirname: str, demo: Optional[bool] = None) -> str:
    if demo is None:
        demo = demo_mode_from_env()
    return os.path.join(dirname, DEMO_INPUT_FILE if demo else INPUT_FILE)


def get_input(dirname: str, demo: Optional[bool] = None) -> str:
    """Read the puzzle input of `dirname`; demo mode swaps in the fixture.

    `demo=None` defers to the environment toggle.
    """
    path = input_path(dirname, demo)
    return read_text(path)


def read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise InputNotFoundError(path) from None
    logger.debug("read %d chars from %s", len(text), path)
    return text


def ask_demo_mode(prompt_fn: Optional[Callable[[str], str]] = None) -> bool:
    answer = (prompt_fn or input)(DEMO_PROMPT)
    return answer.strip() == "y"
