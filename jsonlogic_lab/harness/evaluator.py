"""
Boundary to the JSON Logic evaluator.

The rule language is implemented by the ``json_logic`` package; this module
only adapts it to the ``(rule, data) -> result`` shape the runner times, and
provides the canonical serialization used for complexity scores and output
display.
"""

import json
from typing import Any, Callable

from json_logic import jsonLogic

Evaluator = Callable[[Any, Any], Any]


def evaluate(rule: Any, data: Any) -> Any:
    """Apply a JSON Logic rule to one input value."""
    return jsonLogic(rule, data)


def canonical_json(value: Any) -> str:
    """Compact JSON text with key order preserved, as ``JSON.stringify`` emits it."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def pretty_json(value: Any) -> str:
    """Indented JSON text for display."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def complexity_score(rule: Any) -> int:
    """Character length of the rule's canonical JSON text."""
    return len(canonical_json(rule))
