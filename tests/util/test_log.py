from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from genius.core.global_paths import GlobalPath
from genius.util.log import Log, LogFormat, LogLevel
from tests.helpers import envelope, fake_client, user_payload


def test_log_writes_console_and_file(tmp_path: Path, capsys) -> None:  # type: ignore[no-untyped-def]
    path = tmp_path / "client.log"
    Log.configure(level=LogLevel.INFO, format=LogFormat.KV, console=True, file=True, path=str(path))

    log = Log.create({"service": "test.log"})
    log.info("hello", {"value": 7})
    Log.close()

    stderr = capsys.readouterr().err
    text = path.read_text(encoding="utf-8")

    assert "msg=hello" in stderr
    assert "service=test.log" in stderr
    assert "value=7" in text
    assert Log.file() == str(path)


def test_log_supports_json_format(tmp_path: Path) -> None:
    path = tmp_path / "client.log"
    Log.configure(level=LogLevel.INFO, format=LogFormat.JSON, console=False, file=True, path=str(path))

    log = Log.create({"service": "test.json"})
    log.info("hello world", {"meta": {"k": "v"}})
    Log.close()

    payload = json.loads(path.read_text(encoding="utf-8").strip())

    assert payload["level"] == "info"
    assert payload["msg"] == "hello world"
    assert payload["service"] == "test.json"
    assert payload["meta"] == {"k": "v"}


def test_log_defaults_to_user_log_dir(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path / "logs")))
    Log.configure(file=True)
    Log.create({"service": "test.dir"}).error("boom")
    Log.close()

    assert (tmp_path / "logs" / "genius.log").read_text(encoding="utf-8").count("level=error") == 1


def test_log_is_silent_until_configured(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.create({"service": "test.silent"}).error("nobody hears this")

    assert capsys.readouterr().err == ""


def test_log_level_filters_lower_levels(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.WARN, console=True, file=False)
    log = Log.create({"service": "test.level"})
    log.info("dropped")
    log.warning("kept")

    err = capsys.readouterr().err
    assert "dropped" not in err
    assert "msg=kept" in err


def test_client_logs_requests_without_token(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.DEBUG, format=LogFormat.PRETTY, console=True, file=False)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=envelope(user=user_payload()))

    fake_client(handler, token="secret-token").get_account()

    err = capsys.readouterr().err
    assert "DEBUG request" in err
    assert "path=/account/" in err
    assert "status=200" in err
    assert "secret-token" not in err


@pytest.mark.parametrize(
    ("text", "expected"),
    [(None, LogLevel.INFO), ("debug", LogLevel.DEBUG), ("Warning", LogLevel.WARN), (" error ", LogLevel.ERROR)],
)
def test_log_level_parse(text: str | None, expected: LogLevel) -> None:
    assert LogLevel.parse(text) is expected


def test_log_parse_rejects_unknown_values() -> None:
    with pytest.raises(ValueError):
        LogLevel.parse("verbose")
    with pytest.raises(ValueError):
        LogFormat.parse("xml")
    assert LogFormat.parse("JSON") is LogFormat.JSON


def test_service_loggers_are_cached_with_fixed_tags(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.INFO, console=True)

    first = Log.create({"service": "test.cache"})
    again = Log.create({"service": "test.cache", "extra": "ignored"})
    again.info("cached")

    assert again is first
    assert first.tags == {"service": "test.cache"}
    assert not hasattr(first, "tag")
    assert not hasattr(first, "clone")
    assert "extra=" not in capsys.readouterr().err
