"""Unit tests for export/sinks.py"""

import pytest

from vaultpress.export.sinks import DirectorySink, SinkError, default_sinks, write_first


class FailingSink:
    def write(self, name, data):
        raise PermissionError(f"read-only: {name}")


def test_directory_sink_creates_directory(tmp_path):
    """DirectorySink creates missing parents and writes the bytes."""
    sink = DirectorySink(tmp_path / "a" / "b")
    path = sink.write("out.html", b"<html>")
    assert path == tmp_path / "a" / "b" / "out.html"
    assert path.read_bytes() == b"<html>"


def test_write_first_uses_first_working_sink(tmp_path, caplog):
    """A failing sink is skipped with a warning and the next one is used."""
    caplog.set_level("WARNING", logger="vaultpress.export.sinks")
    path = write_first([FailingSink(), DirectorySink(tmp_path)], "x.pdf", b"%PDF")
    assert path == tmp_path / "x.pdf"
    assert "Could not write x.pdf" in caplog.text


def test_write_first_prefers_earlier_sink(tmp_path):
    """When the first sink works later sinks are untouched."""
    first, second = tmp_path / "first", tmp_path / "second"
    write_first([DirectorySink(first), DirectorySink(second)], "x.html", b"x")
    assert (first / "x.html").exists()
    assert not second.exists()


def test_write_first_all_fail():
    """SinkError is raised, chaining the last OSError."""
    with pytest.raises(SinkError) as exc:
        write_first([FailingSink(), FailingSink()], "x.pdf", b"")
    assert isinstance(exc.value.__cause__, PermissionError)


def test_default_sinks(tmp_path):
    """Output directory first, then the fallback when configured."""
    sinks = default_sinks(str(tmp_path / "dist"), "~/Downloads")
    assert [s.directory.name for s in sinks] == ["dist", "Downloads"]
    assert "~" not in str(sinks[1].directory)
    assert len(default_sinks("dist", None)) == 1
