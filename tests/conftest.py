"""Shared pytest fixtures for beatshow tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Light Group Fixtures
# ============================================================================


@pytest.fixture
def group_size() -> int:
    """Light group size used by most distribution tests."""
    return 12


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def translation_box_json() -> dict[str, Any]:
    """Translation event box as found in a published map (format 3.2)."""
    return {
        "b": 6.5,
        "g": 9,
        "e": [
            {
                "f": {
                    "f": 1,
                    "p": 1,
                    "t": 0,
                    "r": 0,
                    "c": 0,
                    "n": 2,
                    "s": 1087373312,
                    "l": 0,
                    "d": 0,
                },
                "w": 0,
                "d": 1,
                "s": 1,
                "t": 1,
                "b": 1,
                "a": 2,
                "r": 0,
                "i": 0,
                "l": [
                    {"b": 0, "p": 0, "e": -1, "t": 5.45},
                    {"b": 2, "p": 0, "e": 3, "t": 0},
                    {"b": 30.5, "p": 0, "e": 3, "t": 0},
                ],
            }
        ],
    }


@pytest.fixture
def fx_document_json() -> dict[str, Any]:
    """Document with two fx groups sharing the data collection."""
    return {
        "version": "3.3.0",
        "colorNotes": [{"b": 1.0}],
        "vfxEventBoxGroups": [
            {
                "b": 4.0,
                "g": 1,
                "e": [
                    {
                        "f": {"f": 1, "p": 1, "t": 0},
                        "w": 2.0,
                        "d": 1,
                        "s": 1.0,
                        "t": 1,
                        "l": [0, 1],
                    },
                    {"f": {"f": 2, "p": 0, "t": 2}, "l": [2]},
                ],
            }
        ],
        "_fxEventsCollection": {
            "_fl": [
                {"b": 0.0, "p": 0, "i": 0, "v": 0.0},
                {"b": 1.0, "p": 0, "i": 3, "v": 100.0},
                {"b": 0.5, "p": 1, "i": -1, "v": 50.0},
            ],
            "_il": [],
        },
    }
