import pytest

from adventatlas.cli import EXIT_ERROR, EXIT_NOT_FOUND, main


@pytest.fixture
def trace_file(tmp_path, classic_trace):
    p = tmp_path / "trace.txt"
    p.write_text(classic_trace, encoding="utf-8")
    return str(p)


def test_marker_demo(capsys):
    assert main(["marker", "--demo"]) == 0
    assert capsys.readouterr().out.split() == ["7", "5", "6", "10", "11"]


def test_marker_message_demo(capsys):
    assert main(["marker", "--message", "--demo"]) == 0
    assert capsys.readouterr().out.split() == ["19", "23", "23", "29", "26"]


def test_marker_not_found(tmp_path, capsys):
    p = tmp_path / "input.txt"
    p.write_text("aaaa\n", encoding="utf-8")
    assert main(["marker", "--dir", str(tmp_path)]) == EXIT_NOT_FOUND
    assert capsys.readouterr().out.strip() == "not found"


def test_marker_asks_for_demo_mode(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "y")
    assert main(["marker", "--ask"]) == 0
    assert capsys.readouterr().out.split()[0] == "7"


def test_disk(trace_file, capsys):
    assert main(["disk", "--input", trace_file]) == 0
    assert capsys.readouterr().out.split() == ["95437", "24933642"]


def test_disk_tree_and_env(trace_file, capsys, monkeypatch):
    monkeypatch.setenv("ADVENTATLAS_THRESHOLD", "600")
    assert main(["disk", "--input", trace_file, "--tree"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "- / (dir)"
    assert out[-2:] == ["584", "24933642"]


def test_disk_errors_map_to_exit_code(tmp_path, capsys):
    p = tmp_path / "bad.txt"
    p.write_text("$ cd /\n$ cd nowhere\n", encoding="utf-8")
    assert main(["disk", "--input", str(p)]) == EXIT_ERROR
    assert main(["disk", "--input", str(tmp_path / "missing.txt")]) == EXIT_ERROR
    assert main(["disk", "--demo", "--required", "10" + "0" * 9]) == EXIT_ERROR


@pytest.mark.parametrize("window", ["0", "-3"])
def test_marker_rejects_narrow_window(window, tmp_path):
    p = tmp_path / "stream.txt"
    p.write_text("abcd\n", encoding="utf-8")
    assert main(["marker", "--window", window, "--input", str(p)]) == EXIT_ERROR


def test_disk_ls(trace_file, capsys):
    assert main(["disk", "--input", trace_file, "--ls", "/a"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:4] == ["dir e", "f 29116", "g 2557", "h.lst 62596"]
    assert out[4:] == ["95437", "24933642"]


def test_disk_ls_unknown_dir(trace_file):
    assert main(["disk", "--input", trace_file, "--ls", "/nope"]) == EXIT_ERROR
