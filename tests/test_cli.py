import json
from pathlib import Path

from heblemma import cli
from heblemma.cli import main


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: heblemma" in captured.out


def test_cli_lemmatize_returns_json(capsys, hebrew_analyzer) -> None:
    exit_code = main(["lemmatize", "הילדים הלכו", "לבית ו"], analyzer=hebrew_analyzer)
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["results"] == [["ילד", "הלך"], ["בית"]]


def test_cli_lemmatize_first_strategy(capsys, hebrew_analyzer) -> None:
    exit_code = main(["lemmatize", "לבית ו", "--strategy", "first"], analyzer=hebrew_analyzer)
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads(captured.out)["results"] == [["בית", "ו"]]


def test_cli_raw_writes_json_file(tmp_path: Path, capsys, hebrew_analyzer) -> None:
    output_path = tmp_path / "raw.json"
    exit_code = main(["raw", "לבית", "-o", str(output_path)], analyzer=hebrew_analyzer)
    captured = capsys.readouterr()

    assert exit_code == 0
    assert output_path.exists()
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["results"][0][1]["prefixLength"] == 1
    assert "Wrote lemmatization JSON" in captured.out


def test_cli_missing_dictionary_fails(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing"
    exit_code = main(["lemmatize", "שלום", "--dictionary", str(missing)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "error:" in captured.err
    assert str(missing) in captured.err


def test_cli_serve_missing_dictionary_fails(tmp_path: Path, capsys) -> None:
    not_a_dir = tmp_path / "dictionary.txt"
    not_a_dir.write_text("", encoding="utf-8")
    exit_code = main(["serve", "--dictionary", str(not_a_dir)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Expected a folder" in captured.err


def test_cli_download_uses_target_dir(tmp_path: Path, capsys, monkeypatch) -> None:
    calls: list[str | None] = []

    def fake_download(path: str | None) -> Path:
        calls.append(path)
        return Path(path)

    monkeypatch.setattr(cli, "download_dictionary", fake_download)
    exit_code = main(["download", "--dir", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert calls == [str(tmp_path)]
    assert f"Downloaded dictionary to {tmp_path}" in captured.out
