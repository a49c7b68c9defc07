import io
import time

import pytest

from tasksim.logger import Logger, format_log_line


def _split(line):
    assert line.startswith("[")
    stamp, _, message = line[1:].partition("] ")
    return stamp, message


def test_format_log_line_structure():
    line = format_log_line(0, "hello world")
    stamp, message = _split(line)
    assert message == "hello world"
    parsed = time.strptime(stamp, "%a %b %d %H:%M:%S %Y")
    assert parsed.tm_year in (1969, 1970)
    assert "\n" not in line


def test_format_log_line_follows_clock():
    ts = 1_000_000_000
    stamp, _ = _split(format_log_line(ts, "x"))
    parsed = time.strptime(stamp, "%a %b %d %H:%M:%S %Y")
    assert time.mktime(parsed) == pytest.approx(ts, abs=3600)


def test_logger_writes_file_and_stream(tmp_path):
    path = tmp_path / "out.log"
    stream = io.StringIO()
    with Logger(path, stream, clock=lambda: 0) as logger:
        logger.log("Task 1 finished")
        logger.log("Task 2 blocked")
    file_text = path.read_text(encoding="utf-8")
    assert file_text == stream.getvalue()
    lines = file_text.splitlines()
    assert [_split(line)[1] for line in lines] == ["Task 1 finished", "Task 2 blocked"]
    assert lines[0] == format_log_line(0, "Task 1 finished")


def test_logger_truncates_existing_file(tmp_path):
    path = tmp_path / "out.log"
    path.write_text("old contents\n", encoding="utf-8")
    with Logger(path, io.StringIO(), clock=lambda: 0) as logger:
        logger.log("fresh")
    assert path.read_text(encoding="utf-8") == format_log_line(0, "fresh") + "\n"


def test_logger_without_file():
    stream = io.StringIO()
    logger = Logger(None, stream, clock=lambda: 0)
    logger.log("only stream")
    logger.close()
    assert stream.getvalue() == format_log_line(0, "only stream") + "\n"


def test_log_after_close_raises(tmp_path):
    logger = Logger(tmp_path / "out.log", io.StringIO(), clock=lambda: 0)
    logger.close()
    with pytest.raises(ValueError):
        logger.log("too late")


def test_unopenable_path_raises(tmp_path):
    with pytest.raises(OSError):
        Logger(tmp_path / "missing" / "out.log", io.StringIO())