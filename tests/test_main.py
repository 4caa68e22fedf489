import io
import json

import main


def test_keys_from_command_line(settings_file, capsys):
    assert main.main(["2", "+", "3", "×", "4", "="]) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == "20"


def test_error_is_printed(settings_file, capsys):
    assert main.main(["5", "/", "0", "="]) == 1
    out = capsys.readouterr().out
    assert "Error 3003: Division by Zero" in out
    assert out.strip().splitlines()[-1] == "0"


def test_invalid_config_stops_startup(settings_file, capsys):
    settings_file.write_text(json.dumps({"decimal_separator": "7"}), encoding="utf-8")
    assert main.main(["1"]) == 1
    assert "Error 5001" in capsys.readouterr().out


def test_interactive_session(settings_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("200 + 10 %\n=\n:set division_scale 4\n:quit\n9\n"))
    assert main.main([]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["0", "20", "220", "Saved. Restart to apply."]
    assert json.loads(settings_file.read_text(encoding="utf-8"))["division_scale"] == 4


def test_multi_digit_numbers_from_command_line(settings_file, capsys):
    assert main.main(["200", "+", "10", "%", "="]) == 0
    out = capsys.readouterr().out
    assert "Error" not in out
    assert out.strip().splitlines()[-1] == "220"


def test_decimal_numbers_are_split_into_keys(settings_file, capsys):
    assert main.main(["12,5", "×", "2", "="]) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == "25"


def test_split_keys():
    assert main.split_keys(["200", "+", "M+", "12,5", "sin"]) == [
        "2", "0", "0", "+", "M+", "1", "2", ",", "5", "sin",
    ]


def test_log_file_in_missing_directory_is_reported(settings_file, tmp_path, capsys):
    log_file = tmp_path / "nope" / "calc.log"
    settings_file.write_text(json.dumps({"log_file": str(log_file)}), encoding="utf-8")
    assert main.main(["1"]) == 1
    assert "Error 5001: Invalid setting: log_file=" in capsys.readouterr().out


def test_log_file_that_cannot_be_opened_is_reported(settings_file, tmp_path, capsys):
    # An existing directory passes validation but cannot be opened as a file
    settings_file.write_text(json.dumps({"log_file": str(tmp_path)}), encoding="utf-8")
    assert main.main(["1"]) == 1
    assert "Error 5002: Settings could not be saved or applied: log_file:" in capsys.readouterr().out
