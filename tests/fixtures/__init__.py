"""Test fixtures module."""

from tests.fixtures.fakes import BLOB, REV, FakeClient, FakeFileSystem, FakeProvider

__all__ = ["BLOB", "REV", "FakeClient", "FakeFileSystem", "FakeProvider"]
