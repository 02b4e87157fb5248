"""JSON schemas for growthos.yaml and audit reports, and config validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from .config import GrowthConfig
from .exceptions import GrowthOSError
from .types import AuditReport

_config_adapter = TypeAdapter(GrowthConfig)
_report_adapter = TypeAdapter(AuditReport)

SCHEMA_FILES = {
    "growthos_config.schema.json": _config_adapter,
    "audit_report.schema.json": _report_adapter,
}


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in error.errors()
    )


def load_config(path: Union[str, Path]) -> GrowthConfig:
    """Load a growthos.yaml and type-check every field.

    Raises:
        GrowthOSError: If a section is not a mapping or a value has the wrong type
    """
    cfg = GrowthConfig.from_yaml(path)
    try:
        return _config_adapter.validate_python(cfg.to_dict())
    except ValidationError as e:
        raise GrowthOSError(f"Invalid config {path}: {_describe(e)}") from e


def export(output_dir: Path) -> List[Path]:
    """Write the JSON schemas into *output_dir* and return the written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, adapter in SCHEMA_FILES.items():
        path = output_dir / name
        with open(path, "w", encoding="utf-8") as f:
            json.dump(adapter.json_schema(), f, indent=2)
        written.append(path)
    return written
