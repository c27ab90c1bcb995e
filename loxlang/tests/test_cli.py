import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = str(Path(__file__).resolve().parents[2])
LOX = os.path.join(PROJECT_ROOT, "lox.py")


def run_lox(*args, stdin=None, env=None):
    return subprocess.run(
        [sys.executable, LOX, *args],
        capture_output=True,
        text=True,
        input=stdin,
        cwd=PROJECT_ROOT,
        env=env,
    )


def write_script(tmp_path: Path, source: str) -> str:
    path = tmp_path / "script.lox"
    path.write_text(source, encoding="utf-8")
    return str(path)


def test_runs_script(tmp_path):
    script = write_script(tmp_path, 'var a = 1;\nprint a + 2;\nprint "done";\n')
    result = run_lox(script)
    assert result.returncode == 0
    assert result.stdout.splitlines() == ["3", "done"]
    assert result.stderr == ""


def test_syntax_error_exit_code(tmp_path):
    script = write_script(tmp_path, "print 1;\nprint ;\n")
    result = run_lox(script)
    assert result.returncode == 65
    assert result.stdout == ""
    assert result.stderr.strip() == "[line 2] Error at ';': Expect expression."


def test_runtime_error_exit_code(tmp_path):
    script = write_script(tmp_path, "print 1;\nprint nope;\n")
    result = run_lox(script)
    assert result.returncode == 70
    assert result.stdout.splitlines() == ["1"]
    assert result.stderr.splitlines() == ["Undefined variable 'nope'.", "[line 2]"]


def test_missing_script(tmp_path):
    result = run_lox(str(tmp_path / "absent.lox"))
    assert result.returncode == 66


def test_too_many_arguments():
    result = run_lox("a.lox", "b.lox")
    assert result.returncode == 64


def test_debug_flags(tmp_path):
    script = write_script(tmp_path, "print (1 + 2) * 3;")
    result = run_lox("--tokens", "--ast", script)
    assert result.returncode == 0
    assert "PRINT print nil" in result.stdout
    assert "(print (* (group (+ 1 2)) 3))" in result.stdout
    assert result.stdout.splitlines()[-1] == "9"


def test_repl_keeps_variables_and_resets_errors():
    stdin = "var x = 1;\nprint ;\nx = x + 1;\nx;\nprint x * 10;\nexit\n"
    result = run_lox(stdin=stdin)
    assert result.returncode == 0
    out = result.stdout
    assert "Lox Language Interpreter - REPL" in out
    assert "2" in out
    assert "20" in out
    assert "[line 1] Error at ';': Expect expression." in result.stderr


def test_loxdebug_environment_variable(tmp_path):
    script = write_script(tmp_path, "var a = 2;")
    env = dict(os.environ, LOXDEBUG="1")
    result = run_lox(script, env=env)
    assert result.returncode == 0
    assert "Tokens:" in result.stdout
    assert "(var a 2)" in result.stdout
