"""Tests for danger analysis and the aggregate danger report."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from shark.core.models import DangerLevel
from shark.magic.danger import (
    LARGE_SIZE_BYTES,
    MAX_TARGETS,
    assign_level,
    danger_analyze,
    danger_report,
    is_code_file,
)
from shark.magic.fs import DirectoryLister, DirEntryInfo


# -----------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------

def _sparse_file(path: Path, size: int) -> Path:
    with open(path, "wb") as f:
        f.seek(size - 1)
        f.write(b"\0")
    return path


def _secret_dir(root: Path, name: str = "project") -> Path:
    d = root / name
    d.mkdir()
    (d / ".env").write_text("TOKEN=abc\n")
    return d


# -----------------------------------------------------------------------
# Level precedence
# -----------------------------------------------------------------------

class TestAssignLevel:
    @pytest.mark.parametrize(
        "code,secrets,large,expected",
        [
            (False, False, False, DangerLevel.NONE),
            (False, False, True, DangerLevel.MEDIUM),
            (True, False, False, DangerLevel.HIGH),
            (True, False, True, DangerLevel.HIGH),
            (False, True, False, DangerLevel.CRITICAL),
            (True, True, True, DangerLevel.CRITICAL),
        ],
    )
    def test_precedence(self, code, secrets, large, expected):
        assert assign_level(code, secrets, large) == expected

    def test_levels_are_ordered(self):
        assert DangerLevel.NONE < DangerLevel.LOW < DangerLevel.MEDIUM
        assert DangerLevel.MEDIUM < DangerLevel.HIGH < DangerLevel.CRITICAL


class TestIsCodeFile:
    @pytest.mark.parametrize(
        "name",
        ["main.py", "lib.RS", "App.tsx", "Makefile", "CMakeLists.txt", "settings.toml", ".gitignore"],
    )
    def test_recognised(self, name: str):
        assert is_code_file(f"/tmp/x/{name}")

    @pytest.mark.parametrize("name", ["notes.txt", "photo.jpg", "id_rsa", "README"])
    def test_not_recognised(self, name: str):
        assert not is_code_file(name)


# -----------------------------------------------------------------------
# Files
# -----------------------------------------------------------------------

class TestDangerAnalyzeFiles:
    def test_plain_small_file_is_none(self, tmp_path: Path):
        f = tmp_path / "notes.txt"
        f.write_text("hello")

        item = danger_analyze(str(f))

        assert item.level == DangerLevel.NONE
        assert item.target_path == str(f)
        assert item.is_directory is False
        assert item.contains_code is False
        assert item.contains_secrets is False
        assert item.large_size is False
        assert item.writable is True

    def test_code_file_is_high(self, tmp_path: Path):
        f = tmp_path / "main.py"
        f.write_text("print('hi')\n")

        item = danger_analyze(str(f))

        assert item.level == DangerLevel.HIGH
        assert item.contains_code is True
        assert item.contains_vcs is False

    def test_files_never_flag_secrets(self, tmp_path: Path):
        f = tmp_path / "id_rsa"
        f.write_text("-----BEGIN KEY-----")

        item = danger_analyze(str(f))

        assert item.contains_secrets is False
        assert item.level == DangerLevel.NONE

    def test_large_file_is_medium(self, tmp_path: Path):
        f = _sparse_file(tmp_path / "disk.img", LARGE_SIZE_BYTES + 1)

        item = danger_analyze(str(f))

        assert item.large_size is True
        assert item.level == DangerLevel.MEDIUM

    def test_exactly_threshold_is_not_large(self, tmp_path: Path):
        f = _sparse_file(tmp_path / "disk.img", LARGE_SIZE_BYTES)
        assert danger_analyze(str(f)).large_size is False

    def test_large_code_file_stays_high(self, tmp_path: Path):
        f = _sparse_file(tmp_path / "dump.sql", LARGE_SIZE_BYTES + 1)

        item = danger_analyze(str(f))

        assert item.large_size is True
        assert item.level == DangerLevel.HIGH

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_read_only_file_is_not_writable(self, tmp_path: Path):
        f = tmp_path / "locked.txt"
        f.write_text("x")
        f.chmod(0o444)

        assert danger_analyze(str(f)).writable is False

    def test_informational_flags_do_not_change_level(self, tmp_path: Path):
        f = tmp_path / "setup.exe"
        f.write_bytes(b"MZ")

        item = danger_analyze(str(f))

        assert item.suspicious_extension is True
        assert item.level == DangerLevel.NONE


# -----------------------------------------------------------------------
# Directories
# -----------------------------------------------------------------------

class TestDangerAnalyzeDirectories:
    def test_empty_directory_is_none(self, tmp_path: Path):
        item = danger_analyze(str(tmp_path))

        assert item.is_directory is True
        assert item.level == DangerLevel.NONE

    def test_env_file_is_critical(self, tmp_path: Path):
        d = _secret_dir(tmp_path)

        item = danger_analyze(str(d))

        assert item.contains_secrets is True
        assert item.level == DangerLevel.CRITICAL

    @pytest.mark.parametrize("name", ["secret.key", "id_rsa", "private.pem"])
    def test_other_secret_names(self, tmp_path: Path, name: str):
        (tmp_path / name).write_text("x")
        assert danger_analyze(str(tmp_path)).level == DangerLevel.CRITICAL

    def test_git_directory_is_high(self, tmp_path: Path):
        (tmp_path / ".git").mkdir()

        item = danger_analyze(str(tmp_path))

        assert item.contains_code is True
        assert item.contains_vcs is True
        assert item.contains_secrets is False
        assert item.level == DangerLevel.HIGH

    def test_source_files_alone_do_not_flag_directory(self, tmp_path: Path):
        """For directories the code flag only tracks a .git entry."""
        (tmp_path / "main.py").write_text("x = 1\n")

        item = danger_analyze(str(tmp_path))

        assert item.contains_code is False
        assert item.level == DangerLevel.NONE

    def test_secrets_dominate_git(self, tmp_path: Path):
        d = _secret_dir(tmp_path)
        (d / ".git").mkdir()

        assert danger_analyze(str(d)).level == DangerLevel.CRITICAL

    def test_large_immediate_child_is_medium(self, tmp_path: Path):
        _sparse_file(tmp_path / "video.mkv", LARGE_SIZE_BYTES + 1)

        item = danger_analyze(str(tmp_path))

        assert item.large_size is True
        assert item.level == DangerLevel.MEDIUM

    def test_size_is_not_recursive(self, tmp_path: Path):
        nested = tmp_path / "nested"
        nested.mkdir()
        _sparse_file(nested / "video.mkv", LARGE_SIZE_BYTES + 1)

        item = danger_analyze(str(tmp_path))

        assert item.large_size is False
        assert item.level == DangerLevel.NONE

    def test_children_sizes_are_summed(self, tmp_path: Path):
        half = LARGE_SIZE_BYTES // 2 + 1
        _sparse_file(tmp_path / "a.bin", half)
        _sparse_file(tmp_path / "b.bin", half)

        assert danger_analyze(str(tmp_path)).large_size is True

    def test_suspicious_children_are_informational(self, tmp_path: Path):
        (tmp_path / "run.bat").write_text("echo")

        item = danger_analyze(str(tmp_path))

        assert item.contains_suspicious_files is True
        assert item.level == DangerLevel.NONE

    def test_uses_injected_lister(self, tmp_path: Path, fake_lister):
        lister = fake_lister([DirEntryInfo(name=".env", is_file=True)])
        assert danger_analyze(str(tmp_path), lister).level == DangerLevel.CRITICAL


class TestDangerAnalyzeFailures:
    def test_missing_path_is_none(self, tmp_path: Path):
        target = str(tmp_path / "missing")

        item = danger_analyze(target)

        assert item.target_path == target
        assert item.level == DangerLevel.NONE
        assert not any([
            item.is_directory, item.contains_code, item.contains_vcs,
            item.contains_secrets, item.large_size, item.writable,
        ])

    def test_absent_path(self):
        item = danger_analyze(None)
        assert item.target_path == ""
        assert item.level == DangerLevel.NONE

    def test_path_with_nul_byte(self):
        item = danger_analyze("bad\0dir")
        assert item.level == DangerLevel.NONE

    def test_lister_rejecting_path_degrades(self, tmp_path: Path):
        class RejectingLister(DirectoryLister):
            def entries(self, path):
                raise ValueError("embedded null byte")
                yield

        item = danger_analyze(str(tmp_path), RejectingLister())

        assert item.is_directory is True
        assert item.level == DangerLevel.NONE


# -----------------------------------------------------------------------
# Report
# -----------------------------------------------------------------------

class TestDangerReport:
    def test_overall_is_max_level(self, tmp_path: Path):
        notes = tmp_path / "notes.txt"
        notes.write_text("x")
        code = tmp_path / "app.py"
        code.write_text("x")

        report = danger_report([str(notes), str(code)])

        assert report.item_count == 2
        assert report.overall_level == max(i.level for i in report.items)
        assert report.overall_level == DangerLevel.HIGH
        assert report.warning_required is True
        assert report.block_recommended is False

    def test_critical_recommends_block(self, tmp_path: Path):
        d = _secret_dir(tmp_path)

        report = danger_report([str(d)])

        assert report.overall_level == DangerLevel.CRITICAL
        assert report.block_recommended is True
        assert report.warning_required is True

    def test_medium_requires_warning_only(self, tmp_path: Path):
        f = _sparse_file(tmp_path / "disk.img", LARGE_SIZE_BYTES + 1)

        report = danger_report([str(f)])

        assert report.warning_required is True
        assert report.block_recommended is False

    def test_harmless_targets(self, tmp_path: Path):
        f = tmp_path / "notes.txt"
        f.write_text("x")

        report = danger_report([str(f), str(tmp_path / "missing")])

        assert report.overall_level == DangerLevel.NONE
        assert report.warning_required is False
        assert report.block_recommended is False

    def test_truncates_to_eight_targets(self, tmp_path: Path):
        paths = [str(tmp_path / f"f{i}.txt") for i in range(12)]
        paths[10] = str(_secret_dir(tmp_path))

        report = danger_report(paths)

        assert report.item_count == MAX_TARGETS
        assert report.overall_level == DangerLevel.NONE

    def test_empty_input(self):
        report = danger_report([])
        assert report.items == ()
        assert report.overall_level == DangerLevel.NONE
        assert report.block_recommended is False

    def test_accepts_any_iterable(self, tmp_path: Path):
        report = danger_report(str(tmp_path / f"g{i}") for i in range(20))
        assert report.item_count == MAX_TARGETS
