"""
aggregate.py

Sum match scores across the MatchDetails section of a parsed response.

MatchDetails has no fixed shape once it leaves XML: a single <Match> becomes
an object while repeated <Match> tags become a sequence, and the same holds
for MatchDetails itself. Both levels go through `as_sequence` so every shape
is walked the same way.
"""
from __future__ import annotations

import re
from typing import Optional

from match_json.constants import MATCH, MATCH_DETAILS, RESULT_BLOCK, SCORE
from match_json.logging_setup import DiagnosticSink, get_logger
from match_json.transform.tree import Node, as_sequence

_SCORE_RE = re.compile(r"[+-]?[0-9]+")

# Kept below CPython's default int <-> str digit limit (4300)
_DIGIT_CHUNK = 1000


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_total(total: int) -> str:
    """Decimal text of `total`, for any number of digits."""
    if total < 0:
        return "-" + format_total(-total)
    base = 10 ** _DIGIT_CHUNK
    chunks = []
    while total >= base:
        total, rest = divmod(total, base)
        chunks.append(str(rest).zfill(_DIGIT_CHUNK))
    chunks.append(str(total))
    return "".join(reversed(chunks))


def parse_score(text: Optional[str]) -> Optional[int]:
    """Parse a base-10 integer literal, or return None if it is not one.

    Surrounding whitespace is ignored. Underscores, decimal points and any
    non-ASCII digits are rejected. Length is unbounded.
    """
    if text is None:
        return None
    candidate = text.strip()
    if not _SCORE_RE.fullmatch(candidate):
        return None
    sign, digits = (candidate[0], candidate[1:]) if candidate[0] in "+-" else ("+", candidate)
    value = _digits_to_int(digits)
    return -value if sign == "-" else value


def add_score(total: int, text: Optional[str], log: Optional[DiagnosticSink] = None) -> int:
    """Return `total` plus the parsed score, or `total` unchanged if invalid."""
    value = parse_score(text)
    if value is None:
        log = log or get_logger("match_json.aggregate")
        log.warning("Invalid score value encountered, skipping", score=text)
        return total
    return total + value


def total_match_score(tree: Node, log: Optional[DiagnosticSink] = None) -> int:
    """Sum every Match/Score under ResultBlock.MatchDetails.

    Never raises. Missing MatchDetails gives 0; malformed scores are skipped;
    an unexpected failure returns the sum accumulated so far.
    """
    log = log or get_logger("match_json.aggregate")
    total = 0
    try:
        match_details = tree.get(RESULT_BLOCK).get(MATCH_DETAILS)
        if match_details.is_missing():
            log.warning("MatchDetails node is missing in the XML")
            return total

        for group in as_sequence(match_details):
            for record in as_sequence(group.get(MATCH)):
                total = add_score(total, record.get(SCORE).text(), log=log)
    except Exception as e:
        log.error(
            "Error while calculating total match score",
            error=str(e),
            partial_total=format_total(total),
            exc_info=True,
        )
    return total
