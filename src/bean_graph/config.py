from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {
        ".git",
        ".gradle",
        ".idea",
        "build",
        "node_modules",
        "out",
        "target",
    }
)


class AnalysisConfig(BaseModel):
    """Everything a single analysis run needs; built once by the caller."""

    model_config = ConfigDict(frozen=True)

    root: Path
    include_tests: bool = False
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    keep_self_edges: bool = False
    rankdir: Literal["TB", "BT", "LR", "RL"] = "LR"
    bgcolor: str = "white"

    @field_validator("root")
    @classmethod
    def _resolve_root(cls, value: Path) -> Path:
        return value.expanduser().resolve()
