"""
Extraction and repair of JSON embedded in free-text model replies.

The repair pass is deliberately narrow: it fixes the handful of
malformations models actually produce (single-quoted strings, trailing
commas, unquoted keys, raw newlines) and nothing else.
"""
import json
import re
from typing import Any, Optional, Tuple, Type

from app.utils.logging import get_logger

logger = get_logger(__name__)


class UnparsableJsonError(Exception):
    """Model output could not be turned into the expected JSON value"""

    def __init__(self, message: str, candidate: Optional[str] = None):
        super().__init__(message)
        self.candidate = candidate

    @property
    def snippet(self) -> str:
        if not self.candidate:
            return ""
        return self.candidate[:200]


# Closing fence on its own line; a raw newline cannot occur inside a JSON string
_FENCE_RE = re.compile(r"```json[ \t]*\r?\n([\s\S]*?)\r?\n[ \t]*```", re.IGNORECASE)
_INLINE_FENCE_RE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
_OBJECT_RE = re.compile(r"(\{[\s\S]*\})")
_ARRAY_RE = re.compile(r"(\[[\s\S]*\])")

# Double-quoted string literal; an unterminated one runs to the end of input
_STRING_SPLIT_RE = re.compile(r'("(?:\\.|[^"\\])*"?)', re.DOTALL)
_QUOTED_RE = re.compile(r'"(?:\\.|[^"\\])*"?|\'(?:\\.|[^\'\\])*\'', re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r"(?:,\s*)+([}\]])")
_UNQUOTED_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_][\w-]*)(\s*:)")
_NEWLINES_RE = re.compile(r"[\r\n]+")


def _extract(text: Optional[str], span_re: re.Pattern) -> str:
    if not text:
        return ""

    fenced = _FENCE_RE.search(text) or _INLINE_FENCE_RE.search(text)
    if fenced:
        return fenced.group(1).strip()

    span = span_re.search(text)
    if span:
        return span.group(1).strip()

    return text.strip()


def extract_json(text: Optional[str]) -> str:
    """
    Best-effort JSON object substring of a model reply.

    Priority: interior of a ```json fence, then the first ``{`` to the last
    ``}``, then the trimmed input. Never raises.
    """
    return _extract(text, _OBJECT_RE)


def extract_json_array(text: Optional[str]) -> str:
    """Same as ``extract_json`` but spans ``[`` ... ``]``."""
    return _extract(text, _ARRAY_RE)


def _double_quote(literal: str) -> str:
    """'it\\'s "x"' -> "it's \\"x\\"" """
    body = literal[1:-1]
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append("'" if nxt == "'" else ch + nxt)
            i += 2
            continue
        out.append('\\"' if ch == '"' else ch)
        i += 1
    return '"' + "".join(out) + '"'


def _convert_single_quotes(text: str) -> str:
    def replace(match: re.Match) -> str:
        literal = match.group(0)
        return _double_quote(literal) if literal.startswith("'") else literal

    return _QUOTED_RE.sub(replace, text)


def _outside_strings(text: str, pattern: re.Pattern, replacement: str) -> str:
    # re.split with a capture group: odd indices are string literals
    parts = _STRING_SPLIT_RE.split(text)
    for i in range(0, len(parts), 2):
        parts[i] = pattern.sub(replacement, parts[i])
    return "".join(parts)


def repair_json(text: Optional[str]) -> str:
    """
    Apply the fixed textual repair pass to a JSON candidate.

    Steps, in order:
        1. single-quoted strings become double-quoted
        2. trailing commas (or runs of them) before ``}``/``]`` are removed
        3. bare object keys are quoted
        4. newlines are collapsed to spaces

    Steps 2 and 3 only touch text outside string literals. The pass is
    idempotent: ``repair_json(repair_json(x)) == repair_json(x)``.
    """
    if not text:
        return ""

    repaired = _convert_single_quotes(text)
    repaired = _outside_strings(repaired, _TRAILING_COMMA_RE, r"\1")
    repaired = _outside_strings(repaired, _UNQUOTED_KEY_RE, r'\1"\2"\3')
    repaired = _NEWLINES_RE.sub(" ", repaired)
    return repaired.strip()


def loads_with_repair(candidate: str) -> Tuple[Any, bool]:
    """
    Parse ``candidate``, falling back to one repaired attempt.

    Returns:
        Tuple of (value, repaired)

    Raises:
        UnparsableJsonError: Both attempts failed
    """
    try:
        return json.loads(candidate), False
    except json.JSONDecodeError as e:
        logger.info(
            "json.parse.failed",
            extra={"error": str(e), "length": len(candidate)}
        )

    repaired = repair_json(candidate)
    try:
        value = json.loads(repaired)
    except json.JSONDecodeError as e:
        logger.warning(
            "json.repair.failed",
            extra={"error": str(e), "sample": candidate[:200]}
        )
        raise UnparsableJsonError(
            f"Failed to parse model output as JSON: {e.msg}", candidate=candidate
        ) from e

    logger.info("json.repair.succeeded", extra={"length": len(repaired)})
    return value, True


def parse_model_json(text: Optional[str], expect: Type = dict) -> Tuple[Any, bool]:
    """
    Extract, parse and shape-check a model reply.

    Args:
        text: Raw model output
        expect: ``dict`` for an object reply, ``list`` for an array reply

    Returns:
        Tuple of (value, repaired)

    Raises:
        UnparsableJsonError: No parseable JSON, or the wrong top-level type
    """
    candidate = extract_json_array(text) if expect is list else extract_json(text)
    if not candidate:
        raise UnparsableJsonError("Model returned an empty response", candidate=text)

    value, repaired = loads_with_repair(candidate)

    if not isinstance(value, expect):
        kind = "array" if expect is list else "object"
        raise UnparsableJsonError(
            f"Expected a JSON {kind}, got {type(value).__name__}", candidate=candidate
        )

    return value, repaired
