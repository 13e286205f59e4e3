"""Check that third-party imports are declared in pyproject.toml."""
from pathlib import Path
import re

import pytest

ROOT = Path(__file__).resolve().parent.parent

# Import name -> distribution name on the index
RUNTIME_IMPORTS = {
    "fastapi": "fastapi",
    "pydantic": "pydantic",
    "requests": "requests",
    "starlette": "starlette",
    "uvicorn": "uvicorn",
}


def declared_dependencies() -> set:
    text = (ROOT / "pyproject.toml").read_text()
    block = re.search(r"^dependencies = \[(.*?)\]", text, re.MULTILINE | re.DOTALL).group(1)
    return {re.match(r"[A-Za-z0-9_.-]+", dep).group(0).lower() for dep in re.findall(r'"([^"]+)"', block)}


def imported_packages() -> set:
    names = set()
    for path in (ROOT / "arithmetic_http_server").rglob("*.py"):
        for match in re.finditer(r"^(?:from|import) ([A-Za-z_][A-Za-z0-9_]*)", path.read_text(), re.MULTILINE):
            names.add(match.group(1))
    return names


@pytest.mark.parametrize("module,distribution", sorted(RUNTIME_IMPORTS.items()))
def test_runtime_dependency_declared(module: str, distribution: str) -> None:
    """Every third-party package imported by the code is a declared dependency."""
    assert module in imported_packages()
    assert distribution in declared_dependencies()
