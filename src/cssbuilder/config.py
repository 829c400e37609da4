from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None renders compact JSON

    @classmethod
    def from_env(cls) -> CssBuilderConfig:
        """Build a config from ``CSSBUILDER_*`` environment variables."""
        indent = os.environ.get("CSSBUILDER_JSON_INDENT")
        return cls(
            log_level=os.environ.get("CSSBUILDER_LOG_LEVEL", cls.log_level).upper(),
            json_indent=int(indent) if indent else None,
        )
