import curses
import queue
from pathlib import Path

import pytest

from compendium.app import AppConfig, CompendiumApp, main, parse_args
from compendium.components.navigation_state import View
from compendium.components.view_data import CharacterDetailData, HomeData
from compendium.constants import DEFAULT_DATA_DIR, TICK_RATE_MS
from compendium.data_access.errors import DataUnavailable
from compendium.terminal.input_sampler import CLOSED, TICK, InputSamplerError, TerminalEvent


def _key(key) -> TerminalEvent:
    return TerminalEvent(kind="input", key=key)


def _run(app: CompendiumApp, *events):
    pending = queue.Queue()
    for event in events:
        pending.put(event)
    frames = []
    app.run_loop(pending, lambda state, data: frames.append((state, data)))
    return frames


def test_parse_args_defaults():
    config = parse_args([])
    assert config.data_dir == DEFAULT_DATA_DIR
    assert config.tick_rate_ms == TICK_RATE_MS
    assert config.strict is False


def test_parse_args_overrides(tmp_path):
    config = parse_args(["--data-dir", str(tmp_path), "--tick-ms", "50", "--strict", "--log-file", ""])
    assert config.data_dir == Path(tmp_path)
    assert config.tick_rate_ms == 50
    assert config.strict is True
    assert config.log_file is None


def test_parse_args_rejects_non_positive_tick():
    with pytest.raises(SystemExit):
        parse_args(["--tick-ms", "0"])


def test_one_render_per_drained_event_until_quit(data_dir):
    app = CompendiumApp(AppConfig(data_dir=data_dir))
    frames = _run(app, TICK, _key(ord("c")), _key(curses.KEY_DOWN), _key(ord("q")), _key(ord("s")))

    # Initial frame plus one per event before quit.
    assert len(frames) == 4
    assert isinstance(frames[0][1], HomeData)
    assert frames[1][0].view == View.HOME
    state, data = frames[3]
    assert state.view == View.CHARACTER_DETAIL
    assert isinstance(data, CharacterDetailData)
    assert data.character.name == "Tarek"
    assert app.running is False


def test_closed_sampler_stops_loop(data_dir):
    app = CompendiumApp(AppConfig(data_dir=data_dir))
    frames = _run(app, CLOSED)
    assert len(frames) == 1
    assert app.running is False


def test_failed_sampler_error_escapes_loop(data_dir):
    app = CompendiumApp(AppConfig(data_dir=data_dir))
    failure = RuntimeError("terminal went away")
    with pytest.raises(InputSamplerError) as excinfo:
        _run(app, TICK, TerminalEvent(kind="closed", error=failure), _key(ord("c")))
    assert excinfo.value.__cause__ is failure
    assert app.running is False


@pytest.mark.parametrize(
    "error",
    [InputSamplerError("input sampler failed: boom"), DataUnavailable("gear", Path("gear.json"), "missing")],
)
def test_main_reports_failures_with_non_zero_exit(monkeypatch, tmp_path, capsys, data_dir, error):
    def _fail(self):
        raise error

    monkeypatch.setattr(CompendiumApp, "run", _fail)
    status = main(["--data-dir", str(data_dir), "--log-file", str(tmp_path / "viewer.log")])

    assert status == 1
    assert "compendium:" in capsys.readouterr().err


def test_main_returns_zero_on_normal_quit(monkeypatch, tmp_path, data_dir):
    monkeypatch.setattr(CompendiumApp, "run", lambda self: None)
    assert main(["--data-dir", str(data_dir), "--log-file", str(tmp_path / "viewer.log")]) == 0


def test_strict_read_failure_escapes_loop(data_dir):
    (data_dir / "gear.json").unlink()
    app = CompendiumApp(AppConfig(data_dir=data_dir, strict=True))
    with pytest.raises(DataUnavailable):
        _run(app, _key(ord("c")), _key(ord("q")))


def test_degraded_read_failure_keeps_running(data_dir):
    (data_dir / "gear.json").unlink()
    app = CompendiumApp(AppConfig(data_dir=data_dir))
    frames = _run(app, _key(ord("c")), _key(ord("q")))
    data = frames[-1][1]
    assert data.gear == ()
    assert data.errors
