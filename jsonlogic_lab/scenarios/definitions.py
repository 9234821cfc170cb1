"""
Test case definitions for JSON Logic benchmarking.

Defines rules of increasing complexity, each paired with generated input
records:
1. Simple comparison and variable access
2. Nested and branching logic
3. Randomised readings and dotted data paths
4. Large dataset processing
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..config import LabSettings


@dataclass(frozen=True)
class TestCase:
    """A named rule, its input data and how many times to time it."""

    name: str
    rule: Any
    data: Any
    iterations: int = 3
    description: str = ""

    # Keep pytest from collecting this class when imported into test modules.
    __test__ = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("Test case name must not be empty")
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise ValueError(f"iterations must be an integer, got {self.iterations!r}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be positive, got {self.iterations}")

    @property
    def is_sequence(self) -> bool:
        """Whether ``data`` holds one input per element."""
        return isinstance(self.data, (list, tuple))

    @property
    def inputs(self) -> list:
        """Input values the rule is applied to, in order."""
        if self.is_sequence:
            return list(self.data)
        return [self.data]

    def to_dict(self) -> dict:
        """Convert to dictionary (without the input data)."""
        return {
            "name": self.name,
            "description": self.description,
            "rule": self.rule,
            "iterations": self.iterations,
            "input_count": len(self.inputs),
        }


# ============================================================================
# Rules
# ============================================================================

SIMPLE_COMPARISON_RULE = {"==": [{"var": "value"}, 1]}

DATA_VARIABLE_ACCESS_RULE = {">=": [{"var": "temp"}, 20]}

NESTED_LOGIC_RULE = {
    "and": [
        {">=": [{"var": "temp"}, 20]},
        {"<=": [{"var": "temp"}, 30]},
    ]
}

COMPLEX_LOGIC_RULE = {
    "if": [
        {">=": [{"var": "temp"}, 30]},
        "hot",
        {
            "if": [
                {">=": [{"var": "temp"}, 20]},
                "warm",
                "cold",
            ]
        },
    ]
}

ARRAY_OPERATIONS_RULE = {">=": [{"var": "reading"}, 20]}

COMPLEX_DATA_ACCESS_RULE = {
    "and": [
        {">=": [{"var": "main.temp"}, 20]},
        {">=": [{"var": "secondary.temp"}, 15]},
    ]
}

LARGE_DATASET_RULE = {
    "and": [
        {">=": [{"var": "temp"}, 20]},
        {"<=": [{"var": "temp"}, 50]},
        {">=": [{"var": "humidity"}, 20]},
        {"<=": [{"var": "humidity"}, 50]},
    ]
}


# ============================================================================
# Input generators
# ============================================================================

def _repeat(record_fn: Callable[[], dict], size: int) -> list[dict]:
    return [record_fn() for _ in range(size)]


def _large_record(rng: random.Random) -> dict:
    record = {
        "temp": rng.random() * 100,
        "humidity": rng.random() * 100,
    }
    for i in range(1, 11):
        record[f"field{i}"] = i
    return record


def build_test_cases(settings: Optional[LabSettings] = None) -> list[TestCase]:
    """Build the built-in test cases in declaration order.

    Random inputs are drawn from ``random.Random(settings.seed)``, so a fixed
    seed gives identical data across calls.
    """
    settings = settings or LabSettings()
    rng = random.Random(settings.seed)
    size = settings.dataset_size
    iterations = settings.iterations

    return [
        TestCase(
            name="Simple Comparison",
            description="Equality check against a single variable",
            rule=SIMPLE_COMPARISON_RULE,
            data=_repeat(lambda: {"value": 1}, size),
            iterations=iterations,
        ),
        TestCase(
            name="Data Variable Access",
            description="Threshold comparison on a variable",
            rule=DATA_VARIABLE_ACCESS_RULE,
            data=_repeat(lambda: {"temp": 25}, size),
            iterations=iterations,
        ),
        TestCase(
            name="Nested Logic",
            description="Range check combined with 'and'",
            rule=NESTED_LOGIC_RULE,
            data=_repeat(lambda: {"temp": 25}, size),
            iterations=iterations,
        ),
        TestCase(
            name="Complex Logic",
            description="Nested 'if' branches returning labels",
            rule=COMPLEX_LOGIC_RULE,
            data=_repeat(lambda: {"temp": 25}, size),
            iterations=iterations,
        ),
        TestCase(
            name="Array Operations",
            description="Threshold check over random readings",
            rule=ARRAY_OPERATIONS_RULE,
            data=_repeat(lambda: {"reading": rng.randint(20, 29)}, size),
            iterations=iterations,
        ),
        TestCase(
            name="Complex Data Access",
            description="Dotted variable paths into nested objects",
            rule=COMPLEX_DATA_ACCESS_RULE,
            data=_repeat(lambda: {"main": {"temp": 25}, "secondary": {"temp": 22}}, size),
            iterations=iterations,
        ),
        TestCase(
            name="Large Dataset Processing",
            description="Four-way range check over a large record set",
            rule=LARGE_DATASET_RULE,
            data=_repeat(lambda: _large_record(rng), settings.large_dataset_size),
            iterations=iterations,
        ),
    ]


def list_test_cases() -> list[str]:
    """List built-in test case names in declaration order."""
    return [case.name for case in build_test_cases(LabSettings(dataset_size=1, large_dataset_size=1))]


def get_test_case(name: str, settings: Optional[LabSettings] = None) -> TestCase:
    """Get a built-in test case by name."""
    for case in build_test_cases(settings):
        if case.name == name:
            return case
    raise ValueError(f"Unknown test case: {name}")


def select_test_cases(
    names: Optional[list[str]] = None,
    settings: Optional[LabSettings] = None,
) -> list[TestCase]:
    """Select built-in test cases by name, keeping declaration order."""
    cases = build_test_cases(settings)
    if not names:
        return cases
    known = {case.name for case in cases}
    unknown = [name for name in names if name not in known]
    if unknown:
        raise ValueError(f"Unknown test case(s): {', '.join(unknown)}")
    wanted = set(names)
    return [case for case in cases if case.name in wanted]
