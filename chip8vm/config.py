"""Emulator settings, optionally read from a JSON file"""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_CLOCK_HZ, STACK_SIZE
from .scheduler import validate_rate

SCALE = 12                              # Display scale factor


@dataclass
class EmulatorConfig:
    instruction_rate: int = DEFAULT_CLOCK_HZ
    stack_limit: Optional[int] = STACK_SIZE
    seed: Optional[int] = None
    scale: int = SCALE

    def __post_init__(self):
        validate_rate(self.instruction_rate)
        if self.stack_limit is not None and self.stack_limit < 1:
            raise ValueError(f"stack_limit must be positive or null, got {self.stack_limit}")
        if self.scale < 1:
            raise ValueError(f"scale must be positive, got {self.scale}")

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "EmulatorConfig":
        """Read a JSON object holding any subset of the config fields"""
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}: not valid JSON ({e})") from e

        if not isinstance(raw, dict):
            raise ValueError(f"{path}: expected a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise ValueError(f"{path}: unknown settings {', '.join(sorted(unknown))}")
        return cls(**raw)

    def override(self, **changes) -> "EmulatorConfig":
        """Copy with every non-None keyword applied"""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
