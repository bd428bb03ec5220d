# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Verify all package and test source files have the standard 2-line MIT license header."""

from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
PACKAGE_ROOT = ROOT / "src" / "sphera"
TESTS_ROOT = ROOT / "tests"

EXPECTED_HEADER_LINES = [
    "# Copyright (c) 2026 Jeroen Visser. All rights reserved.",
    "# Licensed under the MIT License — see LICENSE.",
]


def _collect_py_files():
    """Collect all .py files in the package and the test suite."""
    return sorted(PACKAGE_ROOT.rglob("*.py")) + sorted(TESTS_ROOT.rglob("*.py"))


def test_all_files_have_standard_mit_header():
    """Every .py file must start with the standard 2-line header."""
    files = _collect_py_files()
    assert len(files) > 0, "No .py files found"

    violations = []
    for py_file in files:
        lines = py_file.read_text(encoding="utf-8").splitlines()
        if len(lines) < 2:
            violations.append((py_file, "File has fewer than 2 lines"))
            continue
        for i, expected in enumerate(EXPECTED_HEADER_LINES):
            if lines[i] != expected:
                violations.append((py_file, f"Line {i + 1}: expected {expected!r}, got {lines[i]!r}"))
                break

    if violations:
        msg_parts = [f"\n{len(violations)} file(s) with non-standard headers:"]
        for path, reason in violations:
            msg_parts.append(f"  {path.relative_to(ROOT)}: {reason}")
        raise AssertionError("\n".join(msg_parts))
