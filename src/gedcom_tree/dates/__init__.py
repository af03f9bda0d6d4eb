from .normalizer import (
    MONTHS,
    NormalizedDate,
    ParsedDate,
    UnparsedDate,
    calculate_age,
    canonical_form,
    format_date,
    normalize_date,
    resolve_point,
    whole_years_between,
)

__all__ = [
    "MONTHS",
    "NormalizedDate",
    "ParsedDate",
    "UnparsedDate",
    "calculate_age",
    "canonical_form",
    "format_date",
    "normalize_date",
    "resolve_point",
    "whole_years_between",
]
