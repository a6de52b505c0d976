import logging

import pytest

from ATGCCoder.utils.io import ensure_dir, open_binary, read_bytes, write_bytes
from ATGCCoder.utils.logging import get_logger
from ATGCCoder.utils.timing import Timer, timing_context


def test_write_and_read_bytes(tmp_path):
    path = tmp_path / "nested" / "file.bin"
    write_bytes(path, b"\x01\x02")
    assert read_bytes(path) == b"\x01\x02"


def test_read_bytes_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_bytes(tmp_path / "missing.bin")


def test_open_binary_closes_only_what_it_opens(tmp_path):
    path = tmp_path / "file.bin"
    path.write_bytes(b"x")
    with open_binary(path) as stream:
        assert stream.read() == b"x"
    assert stream.closed

    with open(path, "rb") as f:
        with open_binary(f) as stream:
            assert stream is f
        assert not f.closed


def test_ensure_dir(tmp_path):
    target = tmp_path / "a" / "b"
    assert ensure_dir(str(target)) == str(target)
    assert target.is_dir()


def test_logger_is_shared_and_level_settable():
    logger = get_logger()
    assert get_logger() is logger
    logger.set_level("DEBUG")
    assert logger.logger.level == logging.DEBUG
    logger.set_level(logging.INFO)
    assert logger.logger.level == logging.INFO


def test_timer():
    timer = Timer()
    with pytest.raises(RuntimeError):
        timer.stop()
    timer.start()
    assert timer.stop() >= 0.0

    with timing_context() as t:
        pass
    assert t.elapsed >= 0.0
