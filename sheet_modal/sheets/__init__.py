from .parser import parse_csv
from .table import (
    BuildResult,
    EmptySheetError,
    build_record,
    build_table,
    normalize_header,
    resolve_key_field,
)

__all__ = [
    "parse_csv",
    "BuildResult",
    "EmptySheetError",
    "build_record",
    "build_table",
    "normalize_header",
    "resolve_key_field",
]
