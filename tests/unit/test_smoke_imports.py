"""Smoke tests for package imports.

This module verifies that all key packages can be imported successfully.
It serves as a basic sanity check for the project structure.
"""

import pytest


@pytest.mark.unit
class TestSmokeImports:
    """Smoke tests to verify all key packages are importable."""

    def test_import_package(self) -> None:
        import pyloaders
        assert pyloaders.__version__

    def test_import_core(self) -> None:
        from pyloaders import core
        assert core is not None

    def test_import_loader_package(self) -> None:
        from pyloaders.libs import loader
        assert loader is not None

    def test_import_observability(self) -> None:
        from pyloaders import observability
        assert observability is not None

    def test_public_api(self) -> None:
        import pyloaders

        for name in pyloaders.__all__:
            assert hasattr(pyloaders, name), name
