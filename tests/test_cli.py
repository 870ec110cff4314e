import pytest

from sortbench.cli import main, run
from sortbench.randdata import read_numbers, read_words


@pytest.mark.parametrize("algorithm", ["heap", "merge", "quick"])
def test_run_numbers_writes_sorted_file(tmp_path, algorithm):
    elapsed = run(algorithm, "numbers", tmp_path, 200)
    original = read_numbers(tmp_path / "number.txt")
    result = read_numbers(tmp_path / "sortnumber.txt")
    assert elapsed >= 0
    assert len(original) == 200
    assert result == sorted(original)


@pytest.mark.parametrize("algorithm", ["heap", "merge", "quick"])
def test_run_words_writes_sorted_file(tmp_path, algorithm):
    run(algorithm, "words", tmp_path, 40)
    original = read_words(tmp_path / "words.txt")
    result = read_words(tmp_path / "sortwords.txt")
    assert len(original) == 40
    assert result == sorted(original)


def test_run_is_deterministic(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    run("quick", "numbers", first, 50)
    run("heap", "numbers", second, 50)
    assert (first / "number.txt").read_text() == (second / "number.txt").read_text()
    assert (first / "sortnumber.txt").read_text() == (second / "sortnumber.txt").read_text()


def test_run_rejects_unknown_algorithm(tmp_path):
    with pytest.raises(ValueError):
        run("bubble", "numbers", tmp_path, 10)


def test_run_rejects_unknown_kind(tmp_path):
    with pytest.raises(ValueError):
        run("heap", "letters", tmp_path, 10)


def test_main_numbers_prints_time(tmp_path, capsys):
    status = main(["--algorithm", "merge", "--count", "60", "--directory", str(tmp_path)])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("the time is ")
    assert read_numbers(tmp_path / "sortnumber.txt") == sorted(read_numbers(tmp_path / "number.txt"))


def test_main_words_prints_nothing(tmp_path, capsys):
    status = main(["--words", "--algorithm", "heap", "--count", "15", "--directory", str(tmp_path)])
    assert status == 0
    assert capsys.readouterr().out == ""
    assert read_words(tmp_path / "sortwords.txt") == sorted(read_words(tmp_path / "words.txt"))


def test_main_reports_unopenable_file(tmp_path, capsys):
    status = main(["--count", "5", "--directory", str(tmp_path / "missing")])
    assert status == 1
    assert "Fail To Open File number.txt!!" in capsys.readouterr().err


def test_main_rejects_negative_count(tmp_path):
    with pytest.raises(SystemExit):
        main(["--count", "-1", "--directory", str(tmp_path)])