"""
goal_core.paths
Output folder helpers.
"""
from __future__ import annotations
from pathlib import Path

OUTPUT_DIR = Path("output")
KINDS = ("csv", "xlsx", "pdf", "logs")

def ensure_output_dirs(root: Path = OUTPUT_DIR) -> None:
    for kind in KINDS:
        (root / kind).mkdir(parents=True, exist_ok=True)

def out_path(kind: str, filename: str, root: Path = OUTPUT_DIR) -> Path:
    k = kind.lower()
    if k not in KINDS:
        raise ValueError(f"Unknown output kind: {kind}")
    ensure_output_dirs(root)
    return root / k / filename
