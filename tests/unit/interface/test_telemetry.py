"""Unit tests for ProjectTelemetry."""

import logging

from field_definitions_linter.interface.telemetry import ProjectTelemetry


def test_handshake_prints_banner(capsys):
    ProjectTelemetry("TEST", "blue", "Hello").handshake()
    assert "[TEST] Hello" in capsys.readouterr().err


def test_step_prints_to_stderr(capsys):
    ProjectTelemetry("TEST", "blue", "Hello").step("Done")
    captured = capsys.readouterr()
    assert "[TEST] Done" in captured.err
    assert captured.out == ""


def test_warning_prints_and_logs(capsys, caplog):
    with caplog.at_level(logging.WARNING):
        ProjectTelemetry("TEST", "blue", "Hello").warning("Careful")
    assert "WARNING: Careful" in capsys.readouterr().err
    assert "Careful" in caplog.text


def test_error_prints_and_logs(capsys, caplog):
    with caplog.at_level(logging.ERROR):
        ProjectTelemetry("TEST", "blue", "Hello").error("Failed")
    assert "ERROR: Failed" in capsys.readouterr().err
    assert "Failed" in caplog.text
