from pathlib import Path

import pytest

from noeagles.files import (
    CommandError,
    get_current_directory,
    get_list_of_files,
    read_csv_file,
    validate_file_exists,
)


def _row(tag, count=13):
    return ",".join(f"{tag}c{i}" for i in range(count))


def test_validate_file_exists_true_for_file_with_padding(tmp_path):
    target = tmp_path / "data.csv"
    target.write_text("x")
    assert validate_file_exists(f"  {target}  ") is True


def test_validate_file_exists_false_for_directory_and_missing(tmp_path):
    assert validate_file_exists(str(tmp_path)) is False
    assert validate_file_exists(str(tmp_path / "missing.csv")) is False


def test_get_current_directory_matches_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = get_current_directory()
    assert Path(result).resolve() == tmp_path.resolve()


def test_get_list_of_files_recurses(tmp_path):
    (tmp_path / "a.csv").write_text("a")
    sub = tmp_path / "sub" / "deeper"
    sub.mkdir(parents=True)
    (sub / "b.csv").write_text("b")
    (tmp_path / "sub" / "c.txt").write_text("c")
    (tmp_path / "empty").mkdir()

    found = get_list_of_files(f" {tmp_path} ")
    expected = {
        str(tmp_path / "a.csv"),
        str(sub / "b.csv"),
        str(tmp_path / "sub" / "c.txt"),
    }
    assert sorted(found) == sorted(expected)


def test_get_list_of_files_rejects_non_directory(tmp_path):
    target = tmp_path / "file.csv"
    target.write_text("x")
    with pytest.raises(CommandError, match="Provided path is not a valid directory."):
        get_list_of_files(str(target))
    with pytest.raises(CommandError):
        get_list_of_files(str(tmp_path / "nowhere"))


def test_read_csv_file_selects_rows_and_columns(tmp_path):
    target = tmp_path / "race.csv"
    target.write_text("\n".join(_row(f"r{n}") for n in range(1, 41)) + "\n")

    records = read_csv_file(str(target))
    assert len(records) == 31
    assert records[0] == ["r8c0", "r8c1", "r8c5", "r8c7", "r8c8", "r8c9", "r8c12"]
    assert records[-1][0] == "r38c0"
    assert all(len(record) == 7 for record in records)


def test_read_csv_file_trims_and_skips_missing_columns(tmp_path):
    lines = ["header"] * 7 + ["  a , b ,c,d,e, f ,g,h ", "only\r"]
    target = tmp_path / "short.csv"
    target.write_bytes("\n".join(lines).encode("utf-8"))

    records = read_csv_file(str(target))
    assert records == [["a", "b", "f", "h"], ["only"]]


def test_read_csv_file_short_file_gives_no_records(tmp_path):
    target = tmp_path / "tiny.csv"
    target.write_text("one\ntwo\n")
    assert read_csv_file(str(target)) == []


def test_read_csv_file_missing_raises(tmp_path):
    with pytest.raises(CommandError):
        read_csv_file(str(tmp_path / "absent.csv"))


def test_read_csv_file_invalid_utf8_raises(tmp_path):
    target = tmp_path / "bad.csv"
    target.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(CommandError):
        read_csv_file(str(target))