"""Tests to verify hexagonal architecture structure."""

import ast
from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the patentflow package path."""
    return PROJECT_ROOT / "patentflow"


def _imported_modules(py_file: Path) -> list[str]:
    tree = ast.parse(py_file.read_text())
    modules: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            modules.append(node.module)
        elif isinstance(node, ast.Import):
            modules.extend(alias.name for alias in node.names)
    return modules


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    layers = ["domain", "application", "infrastructure", "config", "bootstrap"]
    for layer in layers:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_has_no_external_layer_imports(package_path: Path) -> None:
    """Verify domain layer imports NOTHING from other layers.

    Domain is the innermost layer and must remain pure.
    """
    forbidden = tuple(
        f"patentflow.{layer}"
        for layer in ("application", "infrastructure", "config", "bootstrap")
    )
    for py_file in (package_path / "domain").rglob("*.py"):
        offending = [m for m in _imported_modules(py_file) if m.startswith(forbidden)]
        assert not offending, f"{py_file} contains forbidden imports: {offending}"


def test_domain_has_no_third_party_imports(package_path: Path) -> None:
    """Domain code only uses the standard library."""
    third_party = ("structlog", "pydantic", "prometheus_client")
    for py_file in (package_path / "domain").rglob("*.py"):
        offending = [m for m in _imported_modules(py_file) if m.startswith(third_party)]
        assert not offending, f"{py_file} imports third-party modules: {offending}"


def test_application_has_no_forbidden_imports(package_path: Path) -> None:
    """Verify application layer doesn't import bootstrap or concrete adapters.

    NOTE: Observability (logging, correlation) and monitoring are
    cross-cutting concerns the application layer may import.
    """
    allowed_infra = (
        "patentflow.infrastructure.observability",
        "patentflow.infrastructure.monitoring",
    )
    for py_file in (package_path / "application").rglob("*.py"):
        for module in _imported_modules(py_file):
            assert not module.startswith("patentflow.bootstrap"), (
                f"{py_file} imports bootstrap: {module}"
            )
            if module.startswith("patentflow.infrastructure"):
                assert module.startswith(allowed_infra), (
                    f"{py_file} contains forbidden infrastructure import: {module}"
                )


def test_workflow_error_exists() -> None:
    """Verify base exception class is defined."""
    from patentflow.domain.exceptions import WorkflowError

    assert issubclass(WorkflowError, Exception)


def test_workflow_error_importable_from_domain() -> None:
    """Verify WorkflowError is exported from domain __init__."""
    from patentflow.domain import WorkflowError

    assert issubclass(WorkflowError, Exception)


def test_workflow_error_accepts_message() -> None:
    """Verify WorkflowError can be instantiated with a message."""
    from patentflow.domain.exceptions import WorkflowError

    error = WorkflowError("test message")
    assert str(error) == "test message"
    assert error.message == "test message"

    error_default = WorkflowError()
    assert str(error_default) == ""


def test_package_exports_resolve(package_path: Path) -> None:
    """Every name a package lists in __all__ is defined on it."""
    import importlib

    for init_file in package_path.rglob("__init__.py"):
        relative = init_file.parent.relative_to(PROJECT_ROOT)
        module = importlib.import_module(".".join(relative.parts))
        for name in getattr(module, "__all__", []):
            assert hasattr(module, name), f"{module.__name__} exports missing {name}"
