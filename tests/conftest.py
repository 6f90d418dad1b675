"""Pytest configuration for test isolation.

The reference timezone falls back to ``TRIP_DESIGNATOR_TIMEZONE`` when no
explicit ``timezone=`` is passed. A value leaking in from the developer's
shell would shift date conversions, so every test starts with the variable
unset (i.e. the ``America/Vancouver`` default).
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_timezone_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TRIP_DESIGNATOR_TIMEZONE", raising=False)
    monkeypatch.delenv("TRIP_DESIGNATOR_LOG_LEVEL", raising=False)
