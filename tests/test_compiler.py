import sys

import pytest

from nobuild.command import CommandError
from nobuild.compiler import CC, CLANG, GCC, Compiler, CompilerCommand, detect


def _recorder(tmp_path, name="fakecc", exit_code=0):
    record = tmp_path / f"{name}.log"
    script = tmp_path / name
    script.write_text(
        f"#!{sys.executable}\n"
        "import json, sys\n"
        f"with open({str(record)!r}, 'a') as f:\n"
        "    f.write(json.dumps(sys.argv[1:]) + '\\n')\n"
        f"sys.exit({exit_code})\n"
    )
    script.chmod(0o755)
    return script, record


def test_detect_defaults_to_cc():
    assert detect({}) == CC


@pytest.mark.parametrize("name,expected", [("gcc", GCC), ("clang", CLANG), ("cc", CC)])
def test_detect_known(name, expected):
    assert detect({"CC": name}) is expected


def test_detect_unknown_has_no_flags():
    compiler = detect({"CC": "tcc"})
    assert compiler.name == "tcc"
    assert compiler.lookup_flag("debug") is None
    assert compiler.output == ()


def test_lookup_flag():
    assert CC.lookup_flag("syntax-only") == "-fsyntax-only"
    assert GCC.lookup_flag("wall") == "-Wall"
    assert CLANG.lookup_flag("nope") is None


def test_command_starts_with_compiler_name():
    cmd = CompilerCommand(GCC)
    assert cmd.args == ["gcc"]


def test_std_known_and_truncated():
    cmd = CompilerCommand(CC)
    assert cmd.std("c17") is True
    assert cmd.std("c99extra") is True
    assert cmd.args == ["cc", "-std=c17", "-std=c99"]


def test_std_unknown_is_ignored(capsys):
    cmd = CompilerCommand(CC)
    assert cmd.std("c2x") is False
    assert cmd.args == ["cc"]
    assert "unknown C std (c2x) by cc, ignoring" in capsys.readouterr().err


def test_flags_skip_unknown(capsys):
    cmd = CompilerCommand(CLANG)
    cmd.flags("debug", "bogus", "werror")
    assert cmd.args == ["clang", "-g", "-Werror"]
    assert "[WARNING] unknown flag: bogus" in capsys.readouterr().err


def test_output_cc_and_gcc():
    cc_cmd = CompilerCommand(CC)
    cc_cmd.output("sample")
    assert cc_cmd.args == ["cc", "-o", "sample"]
    gcc_cmd = CompilerCommand(GCC)
    gcc_cmd.output("sample")
    assert gcc_cmd.args == ["gcc"]


def test_inputs_appended_in_order():
    cmd = CompilerCommand(CC)
    cmd.inputs("a.c", "b.c")
    assert list(cmd) == ["cc", "a.c", "b.c"]
    assert len(cmd) == 3


def test_run_success(tmp_path):
    script, record = _recorder(tmp_path)
    cmd = CompilerCommand(Compiler(str(script)))
    cmd.inputs("x.c")
    assert cmd.run() == 0
    assert record.read_text().strip() == '["x.c"]'


def test_run_failure_returns_status(tmp_path, capsys):
    script, _ = _recorder(tmp_path, exit_code=3)
    cmd = CompilerCommand(Compiler(str(script)))
    assert cmd.run() == 3
    assert "[ERROR] process exited with 3" in capsys.readouterr().err


def test_run_missing_program(tmp_path):
    cmd = CompilerCommand(Compiler(str(tmp_path / "missing-compiler")))
    with pytest.raises(CommandError):
        cmd.run()