"""
xml_to_json.py

Convert a match-result XML response into the JSON envelope consumers read,
with the total of all match scores injected under
ResultBlock.MatchSummary.TotalMatchScore.

Conventions (see tree.py for the XML binding):

- The root element's tag is dropped and its content wrapped as
  {"Response": ...}
- Field order follows the document; a new MatchSummary goes last in
  ResultBlock, an existing one keeps its position
- TotalMatchScore is always a string so no consumer loses precision

Usage:
    from match_json.transform.xml_to_json import convert
    print(convert(xml_text))
"""
from __future__ import annotations

import json
from typing import Optional, Union

from match_json.constants import (
    ENVELOPE_KEY,
    MATCH_SUMMARY,
    RESULT_BLOCK,
    TOTAL_MATCH_SCORE,
)
from match_json.errors import ConversionError
from match_json.logging_setup import DiagnosticSink, get_logger
from match_json.settings import OutputConfig
from match_json.transform.aggregate import format_total, total_match_score
from match_json.transform.tree import (
    LeafNode,
    Node,
    ObjectNode,
    parse_document,
    unparse_document,
)


def _match_summary(result_block: ObjectNode) -> ObjectNode:
    """Return ResultBlock.MatchSummary, creating it if absent."""
    summary = result_block.get(MATCH_SUMMARY)
    if summary.is_missing():
        return result_block.set(MATCH_SUMMARY, ObjectNode())
    if isinstance(summary, ObjectNode):
        return summary
    # <MatchSummary/> carries nothing to keep; anything else would be lost
    if isinstance(summary, LeafNode) and not summary.text().strip():
        return result_block.set(MATCH_SUMMARY, ObjectNode())
    raise ConversionError(
        f"{MATCH_SUMMARY} exists but is not an object: {summary.to_python()!r}"
    )


def inject_total(tree: Node, total: int) -> ObjectNode:
    """Write `total` into tree.ResultBlock.MatchSummary.TotalMatchScore."""
    result_block = tree.get(RESULT_BLOCK)
    if not isinstance(result_block, ObjectNode):
        if result_block.is_missing():
            raise ConversionError(f"{RESULT_BLOCK} node is missing in the XML")
        raise ConversionError(f"{RESULT_BLOCK} node is not an object")
    summary = _match_summary(result_block)
    summary.set(TOTAL_MATCH_SCORE, LeafNode(format_total(total)))
    return summary


def render(tree: Node, output: OutputConfig) -> str:
    envelope = ObjectNode({ENVELOPE_KEY: tree})
    return json.dumps(
        envelope.to_python(),
        indent=output.indent,
        separators=output.separators(),
        ensure_ascii=output.ensure_ascii,
    )


def convert(
    xml_text: Union[str, bytes],
    *,
    output: Optional[OutputConfig] = None,
    log: Optional[DiagnosticSink] = None,
) -> str:
    """Convert XML to JSON and add MatchSummary.TotalMatchScore.

    Args:
        xml_text: Complete XML document (str, or bytes in the declared encoding)
        output: JSON rendering options; defaults to OutputConfig()
        log: Diagnostic sink; defaults to the module's structlog logger

    Returns:
        The pretty-printed JSON envelope.

    Raises:
        ConversionError: the XML is malformed, ResultBlock is absent or not an
            object, or the tree cannot be serialized.
    """
    log = log or get_logger("match_json.convert")
    output = output or OutputConfig()
    log.info("Starting XML to JSON conversion")
    try:
        tree = parse_document(xml_text)
        total = total_match_score(tree, log=log)
        inject_total(tree, total)
        json_output = render(tree, output)
    except ConversionError as e:
        log.error("XML to JSON conversion failed", error=str(e))
        raise
    except Exception as e:
        log.error("XML to JSON conversion failed", error=str(e), exc_info=True)
        raise ConversionError("Failed to convert XML to JSON.") from e

    log.info("XML to JSON conversion completed", total_match_score=format_total(total))
    return json_output


def revert(json_text: Union[str, bytes], log: Optional[DiagnosticSink] = None) -> str:
    """Turn a converted JSON envelope back into XML.

    The envelope key becomes the root element; former attributes come back as
    child elements.
    """
    log = log or get_logger("match_json.revert")
    try:
        data = json.loads(json_text)
        if not isinstance(data, dict) or len(data) != 1:
            raise ConversionError("JSON envelope must be an object with exactly one key")
        return unparse_document(data)
    except ConversionError as e:
        log.error("JSON to XML conversion failed", error=str(e))
        raise
    except Exception as e:
        log.error("JSON to XML conversion failed", error=str(e), exc_info=True)
        raise ConversionError("Failed to convert JSON to XML.") from e
