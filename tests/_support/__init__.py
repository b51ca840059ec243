"""
Test support utilities for realm-clone tests.

Helpers that don't fit as pytest fixtures but are useful across multiple
test files.
"""

from __future__ import annotations

from typing import Any, Iterator

from realm_clone.core.identifiers import is_identifier


def iter_fields(node: Any, path: str = "") -> Iterator[tuple[str, str, Any]]:
    """
    Yield ``(path, field_name, value)`` for every scalar record field.

    Paths look like ``clients[0].protocolMappers[0].id`` and stay stable
    across a clone as long as no key is removed before them.
    """
    if isinstance(node, list):
        for index, item in enumerate(node):
            yield from iter_fields(item, f"{path}[{index}]")
    elif isinstance(node, dict):
        for key, value in node.items():
            current_path = f"{path}.{key}" if path else key
            if isinstance(value, (dict, list)):
                yield from iter_fields(value, current_path)
            else:
                yield current_path, key, value


def identifier_fields(node: Any) -> dict[str, str]:
    """Map path -> value for every identifier-shaped record field."""
    return {path: value for path, _, value in iter_fields(node) if is_identifier(value)}


def assert_dict_subset(actual: dict, expected: dict, path: str = "") -> None:
    """
    Assert that expected is a subset of actual (recursive).

    Args:
        actual: The full dictionary
        expected: The expected subset
        path: Current path (for error messages)
    """
    for key, expected_value in expected.items():
        current_path = f"{path}.{key}" if path else key

        assert key in actual, f"Missing key at {current_path}"
        actual_value = actual[key]

        if isinstance(expected_value, dict) and isinstance(actual_value, dict):
            assert_dict_subset(actual_value, expected_value, current_path)
        elif isinstance(expected_value, list) and isinstance(actual_value, list):
            assert len(actual_value) >= len(expected_value), (
                f"List at {current_path} too short: "
                f"expected at least {len(expected_value)}, got {len(actual_value)}"
            )
            for i, (exp_item, act_item) in enumerate(zip(expected_value, actual_value)):
                if isinstance(exp_item, dict) and isinstance(act_item, dict):
                    assert_dict_subset(act_item, exp_item, f"{current_path}[{i}]")
                else:
                    assert act_item == exp_item, (
                        f"Mismatch at {current_path}[{i}]: "
                        f"expected {exp_item!r}, got {act_item!r}"
                    )
        else:
            assert actual_value == expected_value, (
                f"Mismatch at {current_path}: "
                f"expected {expected_value!r}, got {actual_value!r}"
            )
