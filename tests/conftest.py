from __future__ import annotations

import pytest

from line_editor.runtime import telemetry


@pytest.fixture(autouse=True, scope="session")
def quiet_telemetry():
    telemetry.configure(preset="quiet")
    yield
    telemetry.configure()
