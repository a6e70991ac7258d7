import pytest

from tekerectc.files import get_file_name, read_file, save_to_file


def test_save_and_read_round_trip(tmp_path):
    target = tmp_path / "a.txt"
    save_to_file(str(target), "3 2")
    assert read_file(str(target)) == "3 2"


def test_save_creates_parent_directories(tmp_path):
    target = tmp_path / "nested" / "deeper" / "case.out"
    save_to_file(target, "-8")
    assert target.parent.is_dir()
    assert read_file(target) == "-8"


def test_save_overwrites_existing(tmp_path):
    target = tmp_path / "case.in"
    save_to_file(target, "first content that is long")
    save_to_file(target, "short")
    assert read_file(target) == "short"


def test_round_trip_unicode(tmp_path):
    target = tmp_path / "u.txt"
    text = "テスト実行\nline two\n"
    save_to_file(target, text)
    assert read_file(target) == text


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.in")


def test_get_file_name_strips_extension():
    assert get_file_name("./testcase/testcase-1.in") == "testcase-1"


def test_get_file_name_without_extension():
    assert get_file_name("dir/plain") == "plain"


@pytest.mark.parametrize("bad", ["", "/", ".."])
def test_get_file_name_rejects_nameless_paths(bad):
    with pytest.raises(ValueError):
        get_file_name(bad)