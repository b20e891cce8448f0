"""
Unit tests for uid I/O row parsing.
"""

import logging

import pytest

from uidmonitor.collectors.uid_io_parser import (
    parse_task_row,
    parse_uid_io_rows,
    parse_uid_row,
)
from uidmonitor.models import Priority


@pytest.mark.unit
class TestParseUidRow:
    """Test cases for uid-summary rows."""

    def test_fields_map_to_priorities(self):
        snapshot = parse_uid_row("1000 1 2 3 4 5 6 7 8 9 10")

        assert snapshot.uid == 1000
        assert snapshot.name == "1000"
        fg = snapshot.io[Priority.FOREGROUND]
        bg = snapshot.io[Priority.BACKGROUND]
        assert (fg.rchar, fg.wchar, fg.read_bytes, fg.write_bytes) == (1, 2, 3, 4)
        assert (bg.rchar, bg.wchar, bg.read_bytes, bg.write_bytes) == (5, 6, 7, 8)
        assert fg.fsync == 9
        assert bg.fsync == 10
        assert snapshot.tasks == {}

    def test_extra_fields_are_ignored(self):
        snapshot = parse_uid_row("1000 1 2 3 4 5 6 7 8 9 10 11 12")
        assert snapshot is not None
        assert snapshot.io[Priority.BACKGROUND].fsync == 10

    def test_too_few_fields(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_uid_row("1000 1 2 3 4 5 6 7 8 9") is None
        assert "Invalid I/O stats" in caplog.text

    @pytest.mark.parametrize(
        "line",
        [
            "abc 1 2 3 4 5 6 7 8 9 10",
            "1000 1 2 x 4 5 6 7 8 9 10",
            "1000 1 2 -3 4 5 6 7 8 9 10",
            "-1 1 2 3 4 5 6 7 8 9 10",
            "1000 +1 2 3 4 5 6 7 8 9 10",
            "1_000 1 2 3 4 5 6 7 8 9 10",
            "1000 1 2 3 4 5 6 7 8 9 0x10",
            "1000 1 2 \u0663 4 5 6 7 8 9 10",
        ],
    )
    def test_invalid_values(self, line):
        assert parse_uid_row(line) is None


@pytest.mark.unit
class TestParseTaskRow:
    """Test cases for task-detail rows."""

    def test_fields(self):
        task = parse_task_row("task,surfaceflinger,321,1,2,3,4,5,6,7,8,9,10")

        assert task.pid == 321
        assert task.comm == "surfaceflinger"
        assert task.io[Priority.FOREGROUND].read_bytes == 3
        assert task.io[Priority.BACKGROUND].write_bytes == 8

    def test_too_few_fields(self):
        assert parse_task_row("task,app,1,1,2,3,4,5,6,7,8,9") is None

    def test_non_numeric_pid(self):
        assert parse_task_row("task,app,pid,1,2,3,4,5,6,7,8,9,10") is None

    def test_negative_counter(self):
        assert parse_task_row("task,app,1,1,2,-3,4,5,6,7,8,9,10") is None

    def test_negative_pid_is_accepted(self):
        task = parse_task_row("task,app,-1,1,2,3,4,5,6,7,8,9,10")
        assert task.pid == -1

    @pytest.mark.parametrize(
        "line",
        [
            "task,app,+1,1,2,3,4,5,6,7,8,9,10",
            "task,app,--1,1,2,3,4,5,6,7,8,9,10",
            "task,app,1, 1,2,3,4,5,6,7,8,9,10",
            "task,app,1,1,2,3_0,4,5,6,7,8,9,10",
            "task,app,1,1,2,3,4,5,6,7,8,9,+10",
        ],
    )
    def test_loosely_formatted_numbers_rejected(self, line):
        assert parse_task_row(line) is None


@pytest.mark.unit
class TestParseUidIoRows:
    """Test cases for assembling a snapshot from rows."""

    def test_tasks_attach_to_preceding_uid(self, rows):
        snapshot = parse_uid_io_rows([
            rows.uid_row(1000, fg_read=10),
            rows.task_row("app", 1, fg_read=4),
            rows.task_row("app:bg", 2, fg_read=6),
            rows.uid_row(2000, fg_read=20),
            rows.task_row("other", 3, fg_read=20),
        ])

        assert list(snapshot) == [1000, 2000]
        assert sorted(snapshot[1000].tasks) == [1, 2]
        assert list(snapshot[2000].tasks) == [3]

    def test_task_after_malformed_uid_attaches_to_last_valid_uid(self, rows):
        snapshot = parse_uid_io_rows([
            rows.uid_row(1000),
            "2000 broken row",
            rows.task_row("app", 7),
        ])

        assert list(snapshot) == [1000]
        assert list(snapshot[1000].tasks) == [7]

    def test_task_before_any_uid_is_dropped(self, rows, caplog):
        with caplog.at_level(logging.WARNING):
            snapshot = parse_uid_io_rows([
                rows.task_row("orphan", 1),
                rows.uid_row(1000),
            ])

        assert snapshot[1000].tasks == {}
        assert "without a preceding uid row" in caplog.text

    def test_malformed_rows_do_not_stop_parsing(self, rows):
        snapshot = parse_uid_io_rows([
            "garbage",
            rows.uid_row(1000, fg_read=1),
            "task,short,row",
            rows.task_row("app", 5),
            "",
            rows.uid_row(1001, bg_write=2),
        ])

        assert list(snapshot) == [1000, 1001]
        assert list(snapshot[1000].tasks) == [5]

    def test_repeated_pid_overwrites(self, rows):
        snapshot = parse_uid_io_rows([
            rows.uid_row(1000),
            rows.task_row("old", 5, fg_read=1),
            rows.task_row("new", 5, fg_read=2),
        ])

        task = snapshot[1000].tasks[5]
        assert task.comm == "new"
        assert task.io[Priority.FOREGROUND].read_bytes == 2

    def test_repeated_uid_row_replaces_entry(self, rows):
        snapshot = parse_uid_io_rows([
            rows.uid_row(1000, fg_read=1),
            rows.task_row("first", 1),
            rows.uid_row(1000, fg_read=9),
            rows.task_row("second", 2),
        ])

        assert snapshot[1000].io[Priority.FOREGROUND].read_bytes == 9
        assert list(snapshot[1000].tasks) == [2]

    def test_empty_input(self):
        assert parse_uid_io_rows([]) == {}
        assert parse_uid_io_rows(["", "   "]) == {}
