import json

import pytest


@pytest.fixture
def nested_left() -> dict:
    """Left-hand document with nested objects and arrays."""
    return {
        "a": 1,
        "b": {"x": 1, "y": [1, 2]},
        "d": "gone",
    }


@pytest.fixture
def nested_right() -> dict:
    """Right-hand counterpart of nested_left: one change per kind."""
    return {
        "a": 2,
        "b": {"x": 1, "y": [1, 3]},
        "c": True,
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a native structure (or raw text) to a file under tmp_path."""

    def _write(name: str, content) -> str:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    return _write
