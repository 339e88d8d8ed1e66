"""
Tests for the indexkit.testing module structure.

These tests verify that the testing module is properly structured and
all exports are available.
"""

import pytest


class TestModuleImportable:
    @pytest.mark.parametrize(
        "module_name",
        [
            "indexkit.testing",
            "indexkit.testing.builder",
            "indexkit.testing.environment",
            "indexkit.testing.assertions",
            "indexkit.testing.bdd",
            "indexkit.testing.utils",
            "indexkit.testing.conformance",
        ],
    )
    def test_module_importable(self, module_name: str) -> None:
        import importlib

        assert importlib.import_module(module_name) is not None


class TestExports:
    def test_all_exports_resolve(self) -> None:
        import indexkit.testing

        for name in indexkit.testing.__all__:
            assert hasattr(indexkit.testing, name), name

    def test_root_exports_resolve(self) -> None:
        import indexkit

        for name in indexkit.__all__:
            assert hasattr(indexkit, name), name

    def test_version_is_string(self) -> None:
        import indexkit

        assert isinstance(indexkit.__version__, str)
