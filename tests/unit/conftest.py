"""Default marks for tests under `tests/unit/`."""

from pathlib import Path

import pytest

UNIT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "unit"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark every test collected from `tests/unit/` as `unit`."""
    for item in items:
        if UNIT_ROOT not in item.path.resolve().parents:
            continue
        if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
