"""
Test case definitions for JSON Logic benchmarking.
"""

from .definitions import (
    TestCase,
    build_test_cases,
    get_test_case,
    list_test_cases,
    select_test_cases,
)

__all__ = [
    "TestCase",
    "build_test_cases",
    "get_test_case",
    "list_test_cases",
    "select_test_cases",
]
