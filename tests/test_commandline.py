import io

import pytest

from stackerrors.commandline import args
from stackerrors.logging import logger
from tests.fixtures import *


@pytest.fixture(scope="function", autouse=True)
def quiet_logger():
    yield
    logger.set_verbose(False)


def test_parse_file_prints_full_trace(settings, tmp_path, capsys):
    path = tmp_path / "panic.log"
    path.write_text(PANIC_IN_GOROUTINE, encoding="utf-8")

    args.parse(["parse", str(path)])

    assert capsys.readouterr().out == (
        "panic runtime error: index out of range [5] with length 3\n"
        "main.worker\n\t/srv/app/worker.go:14\n"
        "main.spawn\n\t/srv/app/worker.go:8\n"
    )


def test_parse_trace_only(settings, tmp_path, capsys):
    path = tmp_path / "panic.log"
    path.write_text(PANIC_SINGLE_FRAME, encoding="utf-8")

    args.parse(["parse", "--trace-only", str(path)])

    assert capsys.readouterr().out == "main.f\n\t/a/b.go:10\n"


def test_parse_standard_input(settings, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(PANIC_SINGLE_FRAME))

    args.parse(["parse"])

    assert capsys.readouterr().out == "panic boom\nmain.f\n\t/a/b.go:10\n"


def test_parse_failure_exits(settings, tmp_path, capsys):
    path = tmp_path / "panic.log"
    path.write_text(PANIC_SINGLE_FRAME.replace("\t", ""), encoding="utf-8")

    with pytest.raises(SystemExit) as info:
        args.parse(["parse", str(path)])

    assert info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Failed to parse panic output" in captured.err
    assert "no tab" in captured.err


def test_parse_with_config(settings, tmp_path, capsys):
    config = tmp_path / "stackerrors.yaml"
    config.write_text("max_stack_depth: 7\n", encoding="utf-8")
    path = tmp_path / "panic.log"
    path.write_text(PANIC_SINGLE_FRAME, encoding="utf-8")

    args.parse(["parse", "--config", str(config), str(path)])

    assert settings.settings().max_stack_depth() == 7


def test_parse_with_invalid_config_exits(settings, tmp_path, capsys):
    config = tmp_path / "stackerrors.yaml"
    config.write_text("depth: 7\n", encoding="utf-8")

    with pytest.raises(SystemExit) as info:
        args.parse(["parse", "--config", str(config), str(tmp_path / "panic.log")])

    assert info.value.code == 1
    assert "Unknown setting 'depth'" in capsys.readouterr().err


def test_parse_verbose_shows_skipped_lines(settings, tmp_path, capsys):
    path = tmp_path / "panic.log"
    path.write_text(PANIC_SINGLE_FRAME, encoding="utf-8")

    args.parse(["parse", "--verbose", str(path)])

    assert "Skipping line: " in capsys.readouterr().err


def test_no_action_prints_help(capsys):
    with pytest.raises(SystemExit) as info:
        args.parse([])

    assert info.value.code == 1
    assert "usage:" in capsys.readouterr().out


def test_parse_failure_reports_exit(settings, tmp_path, capsys):
    path = tmp_path / "panic.log"
    path.write_text("not a panic\n", encoding="utf-8")

    with pytest.raises(SystemExit) as info:
        args.parse(["parse", str(path)])

    assert info.value.code == 1
    err = capsys.readouterr().err
    assert "no prefix" in err
    assert "No trace to show" in err
    assert "Exiting..." in err
