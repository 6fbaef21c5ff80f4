"""
Environment-driven settings for the adrscope command line.

Values come from ADRSCOPE_* environment variables. A .env file in the
working directory is loaded first when present; variables already set in the
environment win over it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_INPUT_DIR = "docs/decisions"
DEFAULT_PATTERN = "**/*.md"
DEFAULT_OUTPUT = "adrs.html"
DEFAULT_WIKI_DIR = "wiki"
DEFAULT_TITLE = "Architecture Decision Records"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_WORKERS = 1


def load_environment(env_path: Optional[Union[str, Path]] = None) -> bool:
    """Load variables from a .env file if it exists.

    Args:
        env_path: File to load (default: .env in the working directory)

    Returns:
        True if a file was loaded
    """
    path = Path(env_path) if env_path else Path.cwd() / ".env"
    if not path.exists():
        return False
    load_dotenv(path, override=False)
    logger.debug(f"Loaded environment from {path}")
    return True


def _int_var(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    input_dir: str = DEFAULT_INPUT_DIR
    pattern: str = DEFAULT_PATTERN
    output: str = DEFAULT_OUTPUT
    wiki_dir: str = DEFAULT_WIKI_DIR
    title: str = DEFAULT_TITLE
    log_level: str = DEFAULT_LOG_LEVEL
    workers: int = DEFAULT_WORKERS

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            env: Mapping to read instead of os.environ

        Raises:
            ValueError: If ADRSCOPE_WORKERS is not an integer or is below 1
        """
        env = os.environ if env is None else env
        workers = _int_var(env, "ADRSCOPE_WORKERS", DEFAULT_WORKERS)
        if workers < 1:
            raise ValueError(f"ADRSCOPE_WORKERS must be at least 1, got {workers}")

        return cls(
            input_dir=env.get("ADRSCOPE_INPUT_DIR", DEFAULT_INPUT_DIR),
            pattern=env.get("ADRSCOPE_PATTERN", DEFAULT_PATTERN),
            output=env.get("ADRSCOPE_OUTPUT", DEFAULT_OUTPUT),
            wiki_dir=env.get("ADRSCOPE_WIKI_DIR", DEFAULT_WIKI_DIR),
            title=env.get("ADRSCOPE_TITLE", DEFAULT_TITLE),
            log_level=env.get("ADRSCOPE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            workers=workers,
        )
