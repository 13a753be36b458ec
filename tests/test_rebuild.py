import os
import stat

import pytest

from nobuild import rebuild
from nobuild.rebuild import go_rebuild_urself, rebuild_command


@pytest.fixture
def posix(monkeypatch):
    monkeypatch.setattr(rebuild, "_WINDOWS", False)


def _make_executable(path, text):
    path.write_text(text)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def fake_cc(tmp_path, monkeypatch):
    """Put a compiler on PATH; it writes a program that records its arguments."""
    bindir = tmp_path / "bin"
    bindir.mkdir()
    args_file = tmp_path / "args.txt"

    def install(exit_code=0):
        script = (
            "#!/bin/sh\n"
            f'printf \'#!/bin/sh\\necho "$@" > {args_file}\\n\' > "$2"\n'
            'chmod +x "$2"\n'
            f"exit {exit_code}\n"
        )
        _make_executable(bindir / "cc", script)
        monkeypatch.setenv("PATH", f"{bindir}{os.pathsep}{os.environ.get('PATH', '')}")
        return args_file

    return install


def _stale_setup(tmp_path):
    binary = tmp_path / "nob"
    source = tmp_path / "nob.c"
    binary.write_text("old binary")
    source.write_text("int main(void) { return 0; }\n")
    os.utime(binary, (1000, 1000))
    os.utime(source, (2000, 2000))
    return binary, source


def test_rebuild_command_posix(posix):
    assert rebuild_command("nob", "nob.c") == ["cc", "-o", "nob", "nob.c"]


def test_rebuild_command_windows(monkeypatch):
    monkeypatch.setattr(rebuild, "_WINDOWS", True)
    assert rebuild_command("nob.exe", "nob.c") == ["cl.exe", "/Fe:nob.exe", "nob.c"]


def test_up_to_date_binary_is_left_alone(tmp_path, posix):
    binary = tmp_path / "nob"
    source = tmp_path / "nob.c"
    source.write_text("source")
    binary.write_text("binary")
    os.utime(source, (1000, 1000))
    os.utime(binary, (2000, 2000))
    assert go_rebuild_urself([str(binary)], str(source)) is None
    assert binary.read_text() == "binary"


def test_missing_source_exits_with_failure(tmp_path, posix):
    binary = tmp_path / "nob"
    binary.write_text("binary")
    with pytest.raises(SystemExit) as info:
        go_rebuild_urself([str(binary)], str(tmp_path / "missing.c"))
    assert info.value.code == 1


def test_extra_source_newer_triggers_rebuild_failure_path(tmp_path, posix, fake_cc):
    fake_cc(exit_code=1)
    binary = tmp_path / "nob"
    source = tmp_path / "nob.c"
    header = tmp_path / "nob.h"
    for path, when in ((binary, 2000), (source, 1000), (header, 3000)):
        path.write_text(path.name)
        os.utime(path, (when, when))
    with pytest.raises(SystemExit) as info:
        go_rebuild_urself([str(binary)], str(source), str(header))
    assert info.value.code == 1
    assert binary.read_text() == "nob"


def test_missing_binary_exits_with_failure(tmp_path, posix):
    source = tmp_path / "nob.c"
    source.write_text("source")
    binary = tmp_path / "nob"
    with pytest.raises(SystemExit) as info:
        go_rebuild_urself([str(binary)], str(source))
    assert info.value.code == 1
    assert not binary.exists()


def test_failed_compile_restores_old_binary(tmp_path, posix, fake_cc):
    fake_cc(exit_code=1)
    binary, source = _stale_setup(tmp_path)
    with pytest.raises(SystemExit) as info:
        go_rebuild_urself([str(binary)], str(source))
    assert info.value.code == 1
    assert binary.read_text() == "old binary"
    assert not (tmp_path / "nob.old").exists()


def test_successful_rebuild_runs_new_binary(tmp_path, posix, fake_cc):
    args_file = fake_cc(exit_code=0)
    binary, source = _stale_setup(tmp_path)
    with pytest.raises(SystemExit) as info:
        go_rebuild_urself([str(binary), "a", "b"], str(source))
    assert info.value.code == 0
    assert args_file.read_text().strip() == "a b"
    assert binary.read_text() != "old binary"
    assert not (tmp_path / "nob.old").exists()


def test_empty_argv_is_rejected(tmp_path, posix):
    with pytest.raises(ValueError):
        go_rebuild_urself([], str(tmp_path / "nob.c"))