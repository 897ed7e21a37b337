from .render import (
    rank_records,
    format_record,
    select_records,
    render_report,
)

__all__ = [
    "rank_records",
    "format_record",
    "select_records",
    "render_report",
]
