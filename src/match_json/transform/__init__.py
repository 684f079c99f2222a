from match_json.transform.aggregate import (
    add_score,
    format_total,
    parse_score,
    total_match_score,
)
from match_json.transform.xml_to_json import convert, revert

__all__ = [
    "add_score",
    "convert",
    "format_total",
    "parse_score",
    "revert",
    "total_match_score",
]
