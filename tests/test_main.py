"""Tests for the command line entry point."""
import io
import json
import logging

import pytest

import main

ORIGINAL_SETUP_LOGGING = main.setup_logging


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda *args, **kwargs: None)


def test_sample_to_stdout(capsys):
    assert main.main(["--sample"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("context:\n  app: converter\n")
    assert "users[3]{id,name,role,active}:\n  1,Alice,admin,true\n" in out
    assert out.endswith("  theme: dark\n")


def test_single_file_to_stdout(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text('{"note": "a,b"}', encoding="utf-8")
    assert main.main([str(path)]) == 0
    assert capsys.readouterr().out == 'note: "a,b"\n'


def test_stdin_is_the_default(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": {"b": 1}}'))
    assert main.main([]) == 0
    assert capsys.readouterr().out == "a:\n  b: 1\n"


def test_output_file(tmp_path):
    source = tmp_path / "doc.json"
    source.write_text('{"tags": ["x"]}', encoding="utf-8")
    target = tmp_path / "result.toon"
    assert main.main([str(source), "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "tags[1]: x"


def test_output_dir(tmp_path):
    for name in ("a", "b"):
        (tmp_path / f"{name}.json").write_text(json.dumps({name: 1}), encoding="utf-8")
    out = tmp_path / "out"
    code = main.main([str(tmp_path / "a.json"), str(tmp_path / "b.json"),
                      "--output-dir", str(out), "--no-progress"])
    assert code == 0
    assert (out / "a.toon").read_text(encoding="utf-8") == "a: 1"
    assert (out / "b.toon").read_text(encoding="utf-8") == "b: 1"


def test_batch_failure_sets_exit_code(tmp_path):
    (tmp_path / "bad.json").write_text("[", encoding="utf-8")
    code = main.main([str(tmp_path), "--output-dir", str(tmp_path / "out"), "--no-progress"])
    assert code == 1


def test_invalid_json_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    assert main.main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file_exit_code(tmp_path):
    assert main.main([str(tmp_path / "missing.json")]) == 1


def test_max_depth_option(tmp_path):
    path = tmp_path / "deep.json"
    path.write_text('{"a": {"b": {"c": 1}}}', encoding="utf-8")
    assert main.main([str(path), "--max-depth", "1"]) == 1


def test_output_rejected_for_batches(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main.main(["a.json", "b.json", "-o", str(tmp_path / "x.toon")])
    assert exc_info.value.code == 2


def test_sample_rejects_sources():
    with pytest.raises(SystemExit):
        main.main(["--sample", "a.json"])


def test_setup_logging(monkeypatch, tmp_path):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    ORIGINAL_SETUP_LOGGING("debug", "")
    assert calls["level"] == logging.DEBUG
    assert calls["force"] is True
    assert [type(h) for h in calls["handlers"]] == [logging.StreamHandler]

    ORIGINAL_SETUP_LOGGING("info", str(tmp_path / "converter.log"))
    file_handler = calls["handlers"][1]
    assert isinstance(file_handler, logging.FileHandler)
    file_handler.close()


def test_undecodable_file_exit_code(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"a": "\xff"}')
    assert main.main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_undecodable_file_in_batch_exit_code(tmp_path):
    (tmp_path / "bad.json").write_bytes(b"[\xff]")
    (tmp_path / "good.json").write_text("[1]", encoding="utf-8")
    out = tmp_path / "out"
    assert main.main([str(tmp_path), "--output-dir", str(out), "--no-progress"]) == 1
    assert (out / "good.toon").read_text(encoding="utf-8") == "1"
