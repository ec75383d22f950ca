import os
import stat

import pytest

from bbxfer.fileinfo import FileInfo, stat_path


def test_default_object_type_is_unknown():
    info = FileInfo()
    assert info.otype == "?"
    assert info.group is None


def test_regular_file(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"x" * 123)
    info = stat_path(target)
    assert info.otype == "f"
    assert info.size == 123
    assert info.fileid == os.stat(target).st_ino


def test_directory(tmp_path):
    info = stat_path(tmp_path)
    assert info.otype == "d"


def test_fifo(tmp_path):
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)
    assert stat_path(fifo).otype == "p"


def test_mode_holds_permission_bits_only(tmp_path):
    target = tmp_path / "perm"
    target.write_text("content")
    os.chmod(target, 0o640)
    assert stat_path(target).mode == 0o640


def test_times_follow_file(tmp_path):
    target = tmp_path / "timed"
    target.write_text("t")
    os.utime(target, (1000000, 2000000))
    info = stat_path(target)
    assert (info.atime, info.mtime) == (1000000, 2000000)


def test_symlink_not_followed_is_unknown(tmp_path):
    target = tmp_path / "real"
    target.write_text("r")
    link = tmp_path / "link"
    link.symlink_to(target)
    assert stat_path(link, follow_links=False).otype == "?"
    assert stat_path(link, follow_links=True).otype == "f"


def test_group_name_present(tmp_path):
    target = tmp_path / "g"
    target.write_text("g")
    info = stat_path(target)
    assert isinstance(info.group, str) and len(info.group) > 0


def test_from_stat_carries_group(tmp_path):
    target = tmp_path / "s"
    target.write_text("abc")
    info = FileInfo.from_stat(os.stat(target), "staff")
    assert info.group == "staff"
    assert info.size == 3
    assert info.mode == stat.S_IMODE(os.stat(target).st_mode)


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        stat_path(tmp_path / "absent")