"""Environment-driven settings for the calculator shell.

Read at call time so tests and wrappers can override values through the
environment without reloading the module.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ERROR_TEXT = "Error"
DEFAULT_PROMPT = "> "


@dataclass(frozen=True)
class Settings:
    """Snapshot of RPNCALC_* configuration."""

    error_text: str = DEFAULT_ERROR_TEXT
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from RPNCALC_ERROR_TEXT and RPNCALC_PROMPT.

        Empty values fall back to the defaults.
        """
        env = os.environ if env is None else env
        return cls(
            error_text=env.get("RPNCALC_ERROR_TEXT") or DEFAULT_ERROR_TEXT,
            prompt=env.get("RPNCALC_PROMPT") or DEFAULT_PROMPT,
        )
