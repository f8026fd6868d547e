"""Text and JSON rendering helpers shared by the commands."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, Callable, Mapping, Optional, Sequence

Projector = Callable[[Any], Any]


def truncate(text: str, width: int) -> str:
    """Shorten text to at most width characters, ending in an ellipsis when cut."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return text[:1]
    return text[: width - 1] + "…"


def truncate_urn(value: str, keep_tail: int = 4) -> str:
    """Shorten "urn:li:kind:123456" to "...kind:1234…"; other strings pass through."""
    if not value.startswith("urn:li:"):
        return value
    if keep_tail <= 0:
        keep_tail = 4
    parts = value.split(":")
    if len(parts) < 4:
        return value
    kind, ident = parts[2], parts[-1]
    if len(ident) <= keep_tail:
        return f"...{kind}:{ident}"
    return f"...{kind}:{ident[:keep_tail]}…"


def _group_thousands(digits: str) -> str:
    return f"{int(digits):,}"


def format_money(value: float) -> str:
    """Render as "$1,234.50"; negatives get a leading "-$"."""
    negative = value < 0
    if negative:
        value = -value
    whole = int(value)
    frac = int((value - whole) * 100 + 0.5)
    if frac >= 100:
        whole += 1
        frac = 0
    sign = "-" if negative else ""
    return f"{sign}${whole:,}.{frac:02d}"


def format_money_string(value: str) -> str:
    """Format a decimal string as money; empty or unparseable input passes through."""
    if value == "" or value != value.strip() or "_" in value:
        return value
    try:
        number = float(value)
    except ValueError:
        return value
    if not math.isfinite(number):
        return value
    return format_money(number)


def format_percent(ratio: float) -> str:
    """Render a ratio as a percentage with two decimals: 0.0046 -> "0.46%"."""
    return f"{ratio * 100:.2f}%"


def format_int(value: int) -> str:
    """Render an integer with comma thousands separators."""
    return f"{value:,}"


def apply_limit(data: Any, limit: int) -> Any:
    """Truncate a list to limit items; non-lists and limit <= 0 pass through."""
    if limit <= 0 or not isinstance(data, (list, tuple)):
        return data
    return data[:limit]


def apply_compact(data: Any, projector: Projector) -> Any:
    """Project each list element, or the value itself when it is not a list."""
    if isinstance(data, (list, tuple)):
        return [projector(item) for item in data]
    return projector(data)


def _jsonable(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return _jsonable(value.to_dict())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if f.metadata.get("omitempty") and item in (None, "", 0, False, [], {}):
                continue
            out[f.metadata.get("json", f.name)] = _jsonable(item)
        return out
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def render_json(data: Any) -> str:
    """Encode data as two-space indented JSON followed by a newline."""
    text = json.dumps(_jsonable(data), indent=2, ensure_ascii=False)
    for char, escaped in (("<", "\\u003c"), (">", "\\u003e"), ("&", "\\u0026"),
                          ("\u2028", "\\u2028"), ("\u2029", "\\u2029")):
        text = text.replace(char, escaped)
    return text + "\n"


def pretty_raw_json(raw: str | bytes) -> str:
    """Re-indent an untyped API response, keeping every field it holds."""
    parsed = json.loads(raw)
    return json.dumps(parsed, indent=2, ensure_ascii=False) + "\n"


def render_output(
    data: Any,
    terminal: Callable[[], str],
    json_output: bool = False,
    limit: int = 0,
    compact: bool = False,
    projector: Optional[Projector] = None,
) -> str:
    """Return the JSON encoding of data or the terminal rendering."""
    data = apply_limit(data, limit)
    if json_output:
        if compact and projector is not None:
            data = apply_compact(data, projector)
        return render_json(data)
    return terminal()


def render_output_with_resolved(
    data: Any,
    resolved: Optional[Mapping[str, str]],
    terminal: Callable[[], str],
    json_output: bool = False,
    limit: int = 0,
    compact: bool = False,
    projector: Optional[Projector] = None,
) -> str:
    """Like render_output, wrapping JSON as {"data", "_resolved"} when names were resolved."""
    if not resolved:
        return render_output(data, terminal, json_output, limit, compact, projector)
    if not json_output:
        return terminal()
    return render_json({"data": apply_limit(data, limit), "_resolved": dict(resolved)})


__all__: Sequence[str] = (
    "truncate",
    "truncate_urn",
    "format_money",
    "format_money_string",
    "format_percent",
    "format_int",
    "apply_limit",
    "apply_compact",
    "render_output",
    "render_output_with_resolved",
    "render_json",
    "pretty_raw_json",
)