"""Convert match-result XML responses to JSON with a computed total score."""

from match_json.errors import ConversionError, MatchJsonError
from match_json.transform.xml_to_json import convert, revert

__version__ = "0.1.0"

__all__ = ["ConversionError", "MatchJsonError", "convert", "revert"]
