import json

import pytest
from typer.testing import CliRunner

from complexity_lens.cli.app import app

runner = CliRunner()

SOURCE = """function pairs(arr) {
  for (let i = 0; i < arr.length; i++) {
    for (let j = 0; j < arr.length; j++) {
      console.log(arr[i], arr[j]);
    }
  }
}

function run(arr) {
  return pairs(arr);
}
"""


@pytest.fixture
def sample(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / "sample.js"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def test_analyze_json(sample):
    result = runner.invoke(app, ["analyze", str(sample), "--format", "json"])
    assert result.exit_code == 0, result.output

    data = json.loads(result.stdout)
    assert [item["name"] for item in data] == ["pairs", "run"]
    assert data[1]["complexity"] == "O(n^2)"
    assert data[1]["local_complexity"] == "O(1)"
    assert data[1]["line"] == 9


def test_analyze_lens(sample):
    result = runner.invoke(app, ["analyze", str(sample), "-f", "lens"])
    assert result.exit_code == 0, result.output

    lines = result.stdout.splitlines()
    index = lines.index("function run(arr) {")
    assert lines[index - 1] == "// Time Complexity: O(n^2)"


def test_analyze_table_with_evidence(sample):
    result = runner.invoke(app, ["analyze", str(sample), "--evidence"])
    assert result.exit_code == 0, result.output
    assert "pairs" in result.stdout
    assert "O(n^2)" in result.stdout
    assert "calls pairs() -> O(n^2)" in result.stdout


def test_regex_strategy_from_config_file(sample, tmp_path):
    config = tmp_path / "lens.json"
    config.write_text(json.dumps({"default_strategy": "regex", "output_format": "json"}))

    result = runner.invoke(app, ["analyze", str(sample), "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.stdout)) == 2


def test_explicit_language_overrides_extension(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / "script.txt"
    path.write_text("function typed(x: number): number { return x; }\n", encoding="utf-8")

    result = runner.invoke(app, ["analyze", str(path), "-l", "ts", "-f", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)[0]["name"] == "typed"


def test_unknown_extension_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / "notes.txt"
    path.write_text("function f() {}\n", encoding="utf-8")

    result = runner.invoke(app, ["analyze", str(path)])
    assert result.exit_code == 1


def test_unknown_strategy_fails(sample):
    result = runner.invoke(app, ["analyze", str(sample), "--strategy", "magic"])
    assert result.exit_code == 1


def test_languages():
    result = runner.invoke(app, ["languages"])
    assert result.exit_code == 0, result.output
    for name in ("javascript", "typescript", "tsx", "tree", "regex"):
        assert name in result.stdout


def test_undecodable_file_reports_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / "binary.js"
    path.write_bytes(b"function f() {}\n\xff\xfe")

    result = runner.invoke(app, ["analyze", str(path), "-f", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == []
