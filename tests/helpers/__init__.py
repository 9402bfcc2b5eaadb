"""Test helper utilities for the vcstamp test suite."""

from tests.helpers.cli_assertions import (
    assert_command_failed,
    assert_command_success,
    assert_stamp,
    assert_stderr_contains,
)

__all__ = [
    "assert_command_success",
    "assert_command_failed",
    "assert_stamp",
    "assert_stderr_contains",
]
