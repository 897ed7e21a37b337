from .schema import (
    SourceOptions,
    ScanOptions,
    ReportOptions,
    RunOptions,
    options_from_config,
    normalize_cli_options,
)

__all__ = [
    "SourceOptions",
    "ScanOptions",
    "ReportOptions",
    "RunOptions",
    "options_from_config",
    "normalize_cli_options",
]
