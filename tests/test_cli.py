from __future__ import annotations

import pytest

from record_filters.cli import main


def test_cli_prints_both_sections(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == ["Animals:", "Cat", "3412-3241", "IDs:"]


def test_cli_selected_pipeline_only(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--pipeline", "ids"])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == ["IDs:"]


def test_cli_logging_stays_off_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--log-level", "DEBUG", "--pipeline", "animals"])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == ["Animals:", "Cat", "3412-3241"]


def test_cli_rejects_unknown_pipeline(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--pipeline", "plants"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
