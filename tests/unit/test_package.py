"""Tests for the installed package surface."""

from importlib import metadata

import symmanifolds


class TestPackage:
    """Distribution metadata and public exports."""

    def test_installed_version_matches(self):
        assert metadata.version("symmanifolds") == symmanifolds.__version__

    def test_public_names_resolve(self):
        for name in symmanifolds.__all__:
            assert hasattr(symmanifolds, name), name
