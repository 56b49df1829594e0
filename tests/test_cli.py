from __future__ import annotations

import os
from pathlib import Path
import subprocess
import sys

from tests.utils import write_env

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def _run_cli(*args: str, cwd: Path) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONDONTWRITEBYTECODE"] = "1"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env["COLUMNS"] = "200"
    env.pop("ENVSEEK_ROOT", None)
    env.pop("ENVSEEK_MAX_DEPTH", None)
    return subprocess.run(
        [sys.executable, "-m", "envseek.cli", *args],
        capture_output=True,
        text=True,
        env=env,
        cwd=cwd,
    )


def test_check_exit_codes(tmp_path: Path) -> None:
    valid = write_env(tmp_path, "PORT=8000\nNAME='demo'\n")
    result_valid = _run_cli("check", str(valid), cwd=tmp_path)
    assert result_valid.returncode == 0
    assert "2 assignment(s) valid" in result_valid.stdout

    invalid = write_env(tmp_path, "PORT=8000\nBAD-KEY=1\n", name="broken.env")
    result_invalid = _run_cli("check", str(invalid), cwd=tmp_path)
    assert result_invalid.returncode == 1
    assert "BAD-KEY" in result_invalid.stdout

    result_lenient = _run_cli("check", "--lenient", str(invalid), cwd=tmp_path)
    assert result_lenient.returncode == 0


def test_scan_reports_applied_files(tmp_path: Path) -> None:
    write_env(tmp_path / "app", "SCAN_ONE=1\n")
    write_env(tmp_path / "app" / "nested", "SCAN_TWO=1\n")
    result = _run_cli("scan", "--all", cwd=tmp_path)
    assert result.returncode == 0
    assert "SCAN_ONE" in result.stdout
    assert "SCAN_TWO" in result.stdout

    result_first = _run_cli("scan", cwd=tmp_path)
    assert result_first.returncode == 0
    assert "SCAN_ONE" in result_first.stdout
    assert "SCAN_TWO" not in result_first.stdout


def test_scan_missing_root_fails(tmp_path: Path) -> None:
    result = _run_cli("scan", "--root", str(tmp_path / "missing"), cwd=tmp_path)
    assert result.returncode == 1


def test_get_prints_typed_value(tmp_path: Path) -> None:
    write_env(tmp_path, "ENVSEEK_CLI_PORT=8080\nENVSEEK_CLI_NAME=\"demo app\"\n")
    result = _run_cli("get", "ENVSEEK_CLI_PORT", "--type", "int", cwd=tmp_path)
    assert result.returncode == 0
    assert result.stdout.strip() == "8080"

    result_name = _run_cli("get", "ENVSEEK_CLI_NAME", cwd=tmp_path)
    assert result_name.stdout.strip() == "demo app"

    result_default = _run_cli("get", "ENVSEEK_CLI_MISSING", "--type", "float", "--default", "1.5", cwd=tmp_path)
    assert result_default.stdout.strip() == "1.5"


def test_get_required_missing_fails(tmp_path: Path) -> None:
    result = _run_cli("get", "ENVSEEK_CLI_ABSENT", "--required", cwd=tmp_path)
    assert result.returncode == 1
    assert "ENVSEEK_CLI_ABSENT" in result.stdout


def test_scan_lenient_parses_each_file_once(tmp_path: Path) -> None:
    write_env(tmp_path, "LENIENT_OK=1\nbroken\n")
    result = _run_cli("scan", "--lenient", cwd=tmp_path)
    assert result.returncode == 0
    assert "LENIENT_OK" in result.stdout
    assert result.stdout.count("Skipping line") == 1


def test_scan_symlink_loop_root_fails_cleanly(tmp_path: Path) -> None:
    if os.name == "nt":
        return
    loop = tmp_path / "loop"
    loop.symlink_to(loop)
    result = _run_cli("scan", "--root", str(loop), cwd=tmp_path)
    assert result.returncode == 1
    assert "Traceback" not in result.stdout + result.stderr


def test_get_bool_default_is_validated(tmp_path: Path) -> None:
    result_invalid = _run_cli("get", "ENVSEEK_CLI_FLAG", "--type", "bool", "--default", "yes", cwd=tmp_path)
    assert result_invalid.returncode == 2

    result_valid = _run_cli("get", "ENVSEEK_CLI_FLAG", "--type", "bool", "--default", "FALSE", cwd=tmp_path)
    assert result_valid.returncode == 0
    assert result_valid.stdout.strip() == "False"
