from __future__ import annotations

import subprocess

import pytest

from dfview.collectors import df_collector
from dfview.collectors.df_collector import DfCollector, query_disk_usage
from dfview.exceptions import QueryError


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=["df", "-k"], returncode=returncode, stdout=stdout, stderr=stderr)


def test_query_returns_stdout(monkeypatch, df_sample):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return _completed(stdout=df_sample)

    monkeypatch.setattr(df_collector.subprocess, "run", fake_run)
    assert query_disk_usage() == df_sample
    cmd, kwargs = calls[0]
    assert cmd == ("df", "-k")
    assert kwargs["capture_output"] is True
    assert "timeout" not in kwargs


def test_query_command_not_found(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(df_collector.subprocess, "run", fake_run)
    with pytest.raises(QueryError) as exc_info:
        query_disk_usage()
    assert str(exc_info.value) == "df -k: command not found"


def test_query_launch_os_error(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(df_collector.subprocess, "run", fake_run)
    with pytest.raises(QueryError, match="Permission denied"):
        query_disk_usage()


def test_query_nonzero_exit(monkeypatch):
    monkeypatch.setattr(
        df_collector.subprocess,
        "run",
        lambda cmd, **kw: _completed(returncode=1, stderr="df: /mnt/gone: Stale file handle\n"),
    )
    with pytest.raises(QueryError, match="Stale file handle"):
        query_disk_usage()


def test_query_nonzero_exit_without_stderr(monkeypatch):
    monkeypatch.setattr(df_collector.subprocess, "run", lambda cmd, **kw: _completed(returncode=2))
    with pytest.raises(QueryError, match="exit status 2"):
        query_disk_usage()


def test_collect_ok():
    text = "Filesystem 1K-blocks Used Available Use% Mounted on\n/dev/sda1 10 5 5 50% /\n"
    res = DfCollector(query=lambda: text).collect()
    assert res.warnings == ()
    assert [r.filesystem for r in res.records] == ["/dev/sda1"]


def test_collect_warns_on_high_usage(df_sample):
    res = DfCollector(query=lambda: df_sample, warn_percent=85).collect()
    assert [w.message for w in res.warnings] == ["Disk usage high: /home 90% (>= 85%)"]
    assert res.warnings[0].record.mount_point == "/home"


def test_collect_strict_passed_to_parser():
    text = "header\n/dev/sda1 x 5 5 50% /\n"
    assert len(DfCollector(query=lambda: text).collect().records) == 1
    assert DfCollector(query=lambda: text, strict=True).collect().records == ()


def test_collect_propagates_query_error():
    def failing():
        raise QueryError(("df", "-k"), "boom")

    with pytest.raises(QueryError):
        DfCollector(query=failing).collect()
