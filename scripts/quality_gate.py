"""Run lint, format, type and test checks; print a JSON summary.

Usage:
    python scripts/quality_gate.py              # everything
    python scripts/quality_gate.py --skip-tests # static checks only
    python scripts/quality_gate.py --fix        # let ruff fix what it can first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

TYPED_MODULES = [
    "zentao_mcp/api.py",
    "zentao_mcp/client.py",
    "zentao_mcp/config.py",
    "zentao_mcp/exceptions.py",
    "zentao_mcp/mcp_server/_core.py",
    "zentao_mcp/mcp_server/_resources.py",
    "zentao_mcp/mcp_server/_prompts.py",
]

SUMMARY_RE = re.compile(r"(\d+)\s+(passed|failed|skipped)")


def _run(*args: str) -> tuple[subprocess.CompletedProcess, float]:
    started = time.monotonic()
    proc = subprocess.run(
        [sys.executable, "-m", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=300,
    )
    return proc, round(time.monotonic() - started, 1)


def _status(proc: subprocess.CompletedProcess) -> str:
    return "pass" if proc.returncode == 0 else "fail"


def ruff_lint(fix: bool) -> dict:
    if fix:
        _run("ruff", "check", "--fix", ".")
    proc, took = _run("ruff", "check", ".")
    problems = [ln for ln in proc.stdout.splitlines() if re.match(r"^\S+:\d+:\d+:", ln)]
    result = {"status": _status(proc), "errors": len(problems), "duration_s": took}
    if proc.returncode:
        result["output"] = proc.stdout.strip()
    return result


def ruff_format() -> dict:
    proc, took = _run("ruff", "format", "--check", ".")
    lines = (proc.stdout + proc.stderr).splitlines()
    result = {
        "status": _status(proc),
        "files_to_reformat": sum(ln.startswith("Would reformat") for ln in lines),
        "duration_s": took,
    }
    if proc.returncode:
        result["output"] = proc.stdout.strip()
    return result


def mypy() -> dict:
    proc, took = _run("mypy", *TYPED_MODULES)
    result = {
        "status": _status(proc),
        "errors": sum(": error:" in ln for ln in proc.stdout.splitlines()),
        "duration_s": took,
    }
    if proc.returncode:
        result["output"] = proc.stdout.strip()
    return result


def pytest() -> dict:
    proc, took = _run("pytest", "tests/", "-q", "--no-header", "--tb=short")
    counts = {"passed": 0, "failed": 0, "skipped": 0}
    for line in reversed(proc.stdout.strip().splitlines()):
        found = SUMMARY_RE.findall(line)
        if found:
            for n, kind in found:
                counts[kind] = int(n)
            break
    result: dict = {"status": _status(proc), **counts, "duration_s": took}
    if proc.returncode:
        result["output"] = proc.stdout.strip()[-2000:]
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    started = time.monotonic()
    checks: dict[str, dict] = {}
    print("Running ruff lint...", file=sys.stderr)
    checks["ruff_lint"] = ruff_lint(args.fix)
    print("Running ruff format...", file=sys.stderr)
    checks["ruff_format"] = ruff_format()
    print("Running mypy...", file=sys.stderr)
    checks["mypy"] = mypy()
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        print("Running pytest...", file=sys.stderr)
        checks["pytest"] = pytest()

    ok = all(c["status"] in ("pass", "skip") for c in checks.values())
    print(
        json.dumps(
            {
                "overall": "pass" if ok else "fail",
                "checks": checks,
                "total_duration_s": round(time.monotonic() - started, 1),
            },
            indent=2,
        )
    )
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
