from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MATCH_REWARD = 10
DEFAULT_MISMATCH_PENALTY = 1
DEFAULT_UNFLIP_DELAY_MS = 1000


@dataclass(frozen=True)
class GameConfig:
    """Scoring and timing constants for a game."""
    match_reward: int = DEFAULT_MATCH_REWARD
    mismatch_penalty: int = DEFAULT_MISMATCH_PENALTY
    unflip_delay_ms: int = DEFAULT_UNFLIP_DELAY_MS

    def __post_init__(self) -> None:
        for name in ('match_reward', 'mismatch_penalty', 'unflip_delay_ms'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")


def _env_int(name: str, default: int) -> int:
    raw: Optional[str] = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def config_from_env() -> GameConfig:
    """Reads MEMORY_MATCH_REWARD, MEMORY_MISMATCH_PENALTY and MEMORY_UNFLIP_DELAY_MS."""
    return GameConfig(
        match_reward=_env_int('MEMORY_MATCH_REWARD', DEFAULT_MATCH_REWARD),
        mismatch_penalty=_env_int('MEMORY_MISMATCH_PENALTY', DEFAULT_MISMATCH_PENALTY),
        unflip_delay_ms=_env_int('MEMORY_UNFLIP_DELAY_MS', DEFAULT_UNFLIP_DELAY_MS),
    )


def debug_enabled() -> bool:
    return os.getenv('MEMORY_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
