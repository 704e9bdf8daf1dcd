# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0"]
# ///
"""Tests that every Python file carries PEP 723 inline script metadata.

Validates:
  1. Each .py file begins with a ``# /// script`` block
  2. The block pins ``requires-python = ">=3.12"``
  3. Third-party packages imported by a file are declared in its block
  4. Packages needed by the project modules a file imports are declared too
  5. The project-level pyproject.toml declares the same runtime stack
"""

import re
import sys
import tomllib
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Import name -> distribution name
THIRD_PARTY = {
    "pydantic": "pydantic",
    "pytest": "pytest",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _all_py_files():
    """Return all .py files in the project tree."""
    files = []
    for f in sorted(PROJECT_ROOT.rglob("*.py")):
        rel = f.relative_to(PROJECT_ROOT)
        if any(part.startswith(".") or part == "__pycache__" for part in rel.parts):
            continue
        files.append(f)
    return files


def _parse_pep723_block(text: str) -> str | None:
    m = re.search(r"^# /// script\s*\n((?:#[^\n]*\n)*?)# ///", text, re.MULTILINE)
    return m.group(1) if m else None


def _extract_dependencies(block: str) -> list[str]:
    clean = "\n".join(re.sub(r"^#\s?", "", line) for line in block.split("\n"))
    m = re.search(r"dependencies\s*=\s*\[([^\]]*)\]", clean)
    if not m:
        return []
    return [d.strip().strip('"').strip("'") for d in m.group(1).split(",") if d.strip()]


def _dist_name(requirement: str) -> str:
    return re.split(r"[<>=!~\[ ]", requirement, maxsplit=1)[0].lower()


def _imported_third_party(text: str) -> set[str]:
    found = set()
    for name in THIRD_PARTY:
        if re.search(rf"^\s*(?:import|from)\s+{name}\b", text, re.MULTILINE):
            found.add(THIRD_PARTY[name])
    return found


PY_FILES = _all_py_files()
IDS = [str(f.relative_to(PROJECT_ROOT)) for f in PY_FILES]


def _module_name(path: Path) -> str:
    parts = list(path.relative_to(PROJECT_ROOT).with_suffix("").parts)
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


MODULES = {_module_name(f): f for f in PY_FILES}


def _files_run_by_import(dotted: str) -> list[Path]:
    """Project files executed by importing *dotted*, enclosing packages first."""
    parts = dotted.split(".")
    prefixes = [".".join(parts[:i]) for i in range(1, len(parts) + 1)]
    return [MODULES[p] for p in prefixes if p in MODULES]


def _required_distributions(path: Path) -> set[str]:
    """Third-party distributions needed to import *path*, following project imports."""
    needed: set[str] = set()
    seen: set[Path] = set()
    stack = [path]
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        text = current.read_text()
        needed |= _imported_third_party(text)
        stack.extend(_files_run_by_import(_module_name(current)))
        for name in re.findall(r"^\s*(?:from|import)\s+([\w.]+)", text, re.MULTILINE):
            stack.extend(_files_run_by_import(name))
    return needed


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

def test_project_has_python_files():
    assert len(PY_FILES) > 10


@pytest.mark.parametrize("path", PY_FILES, ids=IDS)
def test_file_starts_with_metadata_block(path):
    text = path.read_text()
    assert text.startswith("# /// script"), f"{path.name} has no PEP 723 header"
    block = _parse_pep723_block(text)
    assert block is not None
    assert 'requires-python = ">=3.12"' in block


@pytest.mark.parametrize("path", PY_FILES, ids=IDS)
def test_imports_are_declared(path):
    text = path.read_text()
    declared = {_dist_name(d) for d in _extract_dependencies(_parse_pep723_block(text) or "")}
    missing = _imported_third_party(text) - declared
    assert not missing, f"{path.name} imports undeclared packages: {sorted(missing)}"


def test_pyproject_matches_inline_stack():
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        pyproject = tomllib.load(f)
    runtime = {_dist_name(d) for d in pyproject["project"]["dependencies"]}
    test_extra = {_dist_name(d) for d in pyproject["project"]["optional-dependencies"]["test"]}
    assert runtime == {"pydantic"}
    assert "pytest" in test_extra


@pytest.mark.parametrize("path", PY_FILES, ids=IDS)
def test_transitive_imports_are_declared(path):
    declared = {_dist_name(d) for d in _extract_dependencies(_parse_pep723_block(path.read_text()) or "")}
    missing = _required_distributions(path) - declared
    assert not missing, f"{path.name} needs undeclared packages through project imports: {sorted(missing)}"


def test_state_machine_rules_need_pydantic():
    # Importing any rule module runs state_machine/__init__.py, which loads models.
    assert "pydantic" in _required_distributions(PROJECT_ROOT / "state_machine" / "rules" / "walk.py")
