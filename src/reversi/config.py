from __future__ import annotations

import os
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

# Deeper searches build trees that are too big to search in reasonable time.
MAX_SEARCH_DEPTH = 8


class GameConfig(BaseModel):
    search_depth: int = 5
    play_ai: bool = True
    debug: bool = False

    @field_validator("search_depth")
    @classmethod
    def check_search_depth(cls, value: int) -> int:
        if not (1 <= value <= MAX_SEARCH_DEPTH):
            raise ValueError(
                f"Search depth must be between 1 and {MAX_SEARCH_DEPTH}, got {value}"
            )
        return value

    @classmethod
    def from_env(cls) -> GameConfig:
        # The depth stays a string here so pydantic reports bad values.
        return cls.model_validate(
            {
                "search_depth": get_search_depth(),
                "play_ai": get_play_ai(),
                "debug": get_debug(),
            }
        )


def get_search_depth() -> str:
    return os.getenv("REVERSI_SEARCH_DEPTH", "5")


def get_play_ai() -> bool:
    return os.getenv("REVERSI_PLAY_AI", "1") != "0"


def get_debug() -> bool:
    return os.getenv("REVERSI_DEBUG", "0") != "0"
