"""Deterministic object generators for performance benchmarks.

All generators produce fixed, reproducible objects. No random values.
Three tiers: 10-key flat, 1000-key nested, 100-level deep chain.
Each tier provides an "equal" pair and a "late difference" pair whose only
divergence sits at the last position visited, so the full structure is walked.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_1000() -> dict[str, Any]:
    """10 sections x 10 groups x 10 leaves, each group also holding a list."""
    doc: dict[str, Any] = {}
    for i in range(10):
        section: dict[str, Any] = {}
        for j in range(10):
            group: dict[str, Any] = {"items": [{"n": n, "ok": n % 2 == 0} for n in range(5)]}
            group.update({f"field_{k}": f"v_{i}_{j}_{k}" for k in range(10)})
            section[f"group_{j}"] = group
        doc[f"section_{i}"] = section
    return doc


def _make_chain(depth: int) -> dict[str, Any]:
    root: dict[str, Any] = {"level": 0}
    node = root
    for level in range(1, depth):
        child: dict[str, Any] = {"level": level}
        node["next"] = child
        node = child
    return root


def _change_last_leaf(doc: Any) -> Any:
    changed = copy.deepcopy(doc)
    node = changed
    while True:
        last_key = list(node)[-1]
        if isinstance(node[last_key], dict):
            node = node[last_key]
            continue
        node[last_key] = "changed"
        return changed


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_flat_object(10), generate_flat_object(10)


@pytest.fixture
def pair_10key_late_difference() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_flat_object(10)
    return left, _change_last_leaf(left)


@pytest.fixture
def pair_1000key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_nested_1000(), _make_nested_1000()


@pytest.fixture
def pair_1000key_late_difference() -> tuple[dict[str, Any], dict[str, Any]]:
    left = _make_nested_1000()
    return left, _change_last_leaf(left)


@pytest.fixture
def pair_deep_chain_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_chain(100), _make_chain(100)
