"""
json_exporter.py
Structured JSON exporter for parsed GEDCOM datasets.

This exporter:
- Converts dataclasses and enums to plain JSON values (NOT strings of reprs)
- Keeps individuals and families in source order
- Is deterministic for a given dataset
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gedcom_tree.logging import get_logger
from gedcom_tree.registry import GedcomDataset

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums → their value
    - Primitives pass through
    - dataclasses → dict (recursively)
    - dict → dict (recursively)
    - list / tuple / set → list (recursively)
    - Anything else → str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def dataset_to_dict(dataset: GedcomDataset) -> Dict[str, Any]:
    """
    Convert the dataset into a JSON-safe dict.
    """
    return {
        "counts": {
            "individuals": len(dataset.individuals),
            "families": len(dataset.families),
        },
        "individuals": [_to_json_compatible(ind) for ind in dataset.individuals],
        "families": [_to_json_compatible(fam) for fam in dataset.families],
    }


def serialize_dataset_to_json_string(dataset: GedcomDataset, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(dataset_to_dict(dataset), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(dataset_to_dict(dataset), indent=indent, ensure_ascii=False)


def export_dataset_json(dataset: GedcomDataset, output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting dataset JSON to: %s (INDI=%d, FAM=%d)",
        output_path,
        len(dataset.individuals),
        len(dataset.families),
    )

    json_str = serialize_dataset_to_json_string(dataset, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
