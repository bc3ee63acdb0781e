from __future__ import annotations

import os
from dataclasses import dataclass

from ganttlab.parse import NumericPolicy

# Every run writes `test.<ext>` into the working directory.
OUTPUT_BASE_NAME = "test"


@dataclass(frozen=True)
class Settings:
    numeric_policy: NumericPolicy = NumericPolicy.PERMISSIVE
    output_base_name: str = OUTPUT_BASE_NAME

    @staticmethod
    def from_env() -> "Settings":
        raw = os.environ.get("GANTTLAB_NUMERIC_POLICY", "").strip().lower()
        if not raw:
            return Settings()
        try:
            policy = NumericPolicy(raw)
        except ValueError:
            raise ValueError(
                f"GANTTLAB_NUMERIC_POLICY must be 'permissive' or 'strict' (got {raw!r})"
            ) from None
        return Settings(numeric_policy=policy)
