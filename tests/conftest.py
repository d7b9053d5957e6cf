"""Global pytest fixtures for WORDCASE."""

import pytest

from wordcase.config import DEFAULT_STYLE_ENV, LOG_LEVEL_ENV


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove WORDCASE_* variables so tests see the built-in defaults.

    Example:
        ```py
        pytestmark = pytest.mark.usefixtures("clean_env")
        ```
    """
    monkeypatch.delenv(DEFAULT_STYLE_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
