"""Access log middleware tests."""

import logging

import pytest
from fastapi.testclient import TestClient

from usuarios_api.core.config import Settings
from usuarios_api.core.log import LOG_FORMAT, configure_logging
from usuarios_api.main import create_app


def _access_lines(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [record.getMessage() for record in caplog.records if record.name == "usuarios_api.access"]


def test_request_logging_writes_one_line_per_request(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="usuarios_api.access")
    client = TestClient(create_app(settings=Settings(request_logging=True)))

    client.get("/api/usuarios/2")
    client.get("/api/usuarios/999")

    lines = _access_lines(caplog)
    assert len(lines) == 2
    assert lines[0].startswith("GET /api/usuarios/2 200 ")
    assert lines[0].endswith(" ms")
    assert lines[1].startswith("GET /api/usuarios/999 404 ")


def test_request_logging_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="usuarios_api.access")
    client = TestClient(create_app(settings=Settings(request_logging=False)))

    client.get("/api/usuarios")

    assert _access_lines(caplog) == []


def test_configure_logging_installs_stdout_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == LOG_FORMAT
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
