"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    dataset_to_dict,
    export_dataset_json,
    serialize_dataset_to_json_string,
)

__all__ = [
    "dataset_to_dict",
    "export_dataset_json",
    "serialize_dataset_to_json_string",
]
