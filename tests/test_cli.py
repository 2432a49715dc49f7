import io
import logging

import break_words
from wordbreak import run_cli


def test_run_cli_prints_one_word_per_line(english):
    out = io.StringIO()
    status = run_cli(english, ["helloworld", "thecat"], out=out)
    assert status == 0
    assert out.getvalue().splitlines() == ["hello", "world", "the", "cat"]


def test_run_cli_continues_after_failure(english, caplog):
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger="wordbreak.cli"):
        status = run_cli(english, ["hello", "xyz", "world"], out=out)
    assert status == 1
    assert out.getvalue().splitlines() == ["hello", "world"]
    assert "cannot segment 'xyz'" in caplog.text


def test_run_cli_strict_rejects_non_alphabetic(english, caplog):
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger="wordbreak.cli"):
        status = run_cli(english, ["hello-world"], strict=True, out=out)
    assert status == 1
    assert out.getvalue() == ""
    assert "non-alphabetic" in caplog.text


def test_main_with_arguments(word_file, capsys):
    status = break_words.main(["--dict", str(word_file), "applecart", "Banana"])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["apple", "cart", "Banana"]


def test_main_reads_stdin(word_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("cherrycar\n  apple\n"))
    status = break_words.main(["--dict", str(word_file)])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["cherry", "car", "apple"]


def test_main_reports_failure(word_file, capsys):
    status = break_words.main(["--dict", str(word_file), "applepie"])
    assert status == 1
    assert capsys.readouterr().out == ""


def test_main_missing_word_list(tmp_path):
    assert break_words.main(["--dict", str(tmp_path / "nope.txt")]) == 2


def test_main_word_list_is_a_directory(tmp_path):
    assert break_words.main(["--dict", str(tmp_path), "hello"]) == 2


def test_main_word_list_not_utf8(tmp_path):
    path = tmp_path / "words.bin"
    path.write_bytes(b"caf\xe9\n")
    assert break_words.main(["--dict", str(path), "hello"]) == 2
