import json
from datetime import timedelta
from zoneinfo import ZoneInfo

import pytest
from structlog.testing import capture_logs

from happy_hour import main
from happy_hour.models import SerialLookup


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "HAPPY_HOUR_TIMEZONE",
        "HAPPY_HOUR_CURRENCY_SYMBOL",
        "HAPPY_HOUR_LOG_LEVEL",
        "HAPPY_HOUR_SERIAL_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_json(capsys):
    assert main.cli(["defaults", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"location": "The Local Pub", "time": "17:00", "durationMinutes": 120}


def test_info_text(capsys):
    assert main.cli(["info", "--location", "Rooftop Bar", "--date", "2025-12-10"]) == 0
    out = capsys.readouterr().out
    assert "Happy hour at Rooftop Bar" in out
    assert "2025-12-10 (Wednesday)" in out


def test_info_json_uses_default_location(capsys):
    assert main.cli(["info", "--date", "2025-12-10", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["location"] == "The Local Pub"
    assert payload["dayOfWeek"] == "Wednesday"
    assert payload["duration"] == "120 minutes"


def test_invalid_date_exits():
    with pytest.raises(SystemExit, match="Invalid --date"):
        main.cli(["info", "--date", "not a date"])


def test_create_event_json(capsys):
    argv = [
        "create-event",
        "--location", "Rooftop Bar",
        "--date", "2025-12-10T17:00",
        "--attendee", "Alice",
        "--attendee", "Bob",
        "--attendee", "Charlie",
        "--json",
    ]
    assert main.cli(argv) == 0
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert payload["location"] == "Rooftop Bar"
    assert payload["dateTime"].startswith("2025-12-10T17:00:00")
    assert payload["attendees"] == ["Alice", "Bob", "Charlie"]
    assert payload["theme"] is None
    assert payload["status"] == "Scheduled"
    assert payload["eventId"]
    assert "Happy hour event created!" in captured.err


def test_create_event_dry_run(capsys):
    argv = ["create-event", "--location", "Rooftop Bar", "--date", "2025-12-10T17:00", "--dry-run"]
    assert main.cli(argv) == 0
    out = capsys.readouterr().out
    assert out.startswith("What if:")
    assert "Happy hour event created!" not in out


def test_create_event_confirm_declined(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    argv = ["create-event", "--location", "Pub", "--date", "2025-12-10T17:00", "--confirm"]
    assert main.cli(argv) == 0
    assert "Happy hour event created!" not in capsys.readouterr().out


def test_create_event_confirm_accepted(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "yes")
    argv = ["create-event", "--location", "Pub", "--date", "2025-12-10T17:00", "--confirm"]
    assert main.cli(argv) == 0
    assert "Happy hour event created!" in capsys.readouterr().out


def test_menu_with_prices(capsys):
    assert main.cli(["menu", "--category", "Food", "--include-prices"]) == 0
    out = capsys.readouterr().out
    assert "Chicken Wings - $9.00" in out
    assert "Craft Beer" not in out


def test_menu_currency_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("HAPPY_HOUR_CURRENCY_SYMBOL", "€")
    assert main.cli(["menu", "--category", "drinks", "--include-prices"]) == 0
    assert "Craft Beer - €5.00" in capsys.readouterr().out


def test_menu_bogus_category(capsys):
    assert main.cli(["menu", "--category", "Bogus"]) == 2
    captured = capsys.readouterr()
    assert "Invalid category 'Bogus'" in captured.err
    assert captured.out == ""


def test_serial_success(monkeypatch, capsys):
    monkeypatch.setattr(main, "get_host_serial_number", lambda reader: SerialLookup(serial="SN-1"))
    assert main.cli(["serial"]) == 0
    assert capsys.readouterr().out.strip() == "SN-1"


def test_serial_failure(monkeypatch, capsys):
    def unreadable(timeout):
        raise OSError("no dmi")

    monkeypatch.setattr(main, "read_host_serial", unreadable)
    assert main.cli(["serial"]) == 1
    assert "no dmi" in capsys.readouterr().err


def test_invalid_settings_exit_cleanly(monkeypatch, capsys):
    monkeypatch.setenv("HAPPY_HOUR_LOG_LEVEL", "chatty")
    assert main.cli(["defaults"]) == 2
    captured = capsys.readouterr()
    assert "Error: invalid configuration" in captured.err
    assert "chatty" in captured.err
    assert captured.out == ""


def test_invalid_serial_timeout_setting(monkeypatch, capsys):
    monkeypatch.setenv("HAPPY_HOUR_SERIAL_TIMEOUT_SECONDS", "soon")
    assert main.cli(["serial"]) == 2
    assert "Error: invalid configuration" in capsys.readouterr().err


def test_unexpected_error_is_logged(monkeypatch):
    def explode():
        raise RuntimeError("catalog offline")

    monkeypatch.setattr(main, "get_defaults", explode)
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    with capture_logs() as logs:
        assert main.cli(["defaults"]) == 1
    assert logs[-1]["event"] == "command.failed"
    assert logs[-1]["command"] == "defaults"
    assert logs[-1]["error"] == "catalog offline"


def test_confirm_without_stdin_exits_with_error(monkeypatch, capsys):
    def closed_stdin(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)
    argv = ["create-event", "--location", "Pub", "--date", "2025-12-10T17:00", "--confirm"]
    assert main.cli(argv) == 1
    assert "Happy hour event created!" not in capsys.readouterr().out


def test_naive_date_takes_configured_zone():
    when = main.resolve_date("2025-12-10T17:00", "Europe/London")
    assert when.tzinfo == ZoneInfo("Europe/London")
    assert when.hour == 17


def test_explicit_offset_is_kept():
    when = main.resolve_date("2025-12-10T17:00+02:00", "Europe/London")
    assert when.utcoffset() == timedelta(hours=2)


def test_created_and_date_time_share_the_zone(monkeypatch, capsys):
    monkeypatch.setenv("HAPPY_HOUR_TIMEZONE", "Asia/Tokyo")
    argv = ["create-event", "--location", "Pub", "--date", "2025-12-10T17:00", "--json"]
    assert main.cli(argv) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["dateTime"] == "2025-12-10T17:00:00+09:00"
    assert payload["created"].endswith("+09:00")
