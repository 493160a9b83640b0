"""Tests for the documentation model."""

import pytest

from dochtml import Decl, ModuleRole, Package
from dochtml.location import SourceLocation


class TestPackage:
    def test_defaults(self) -> None:
        pkg = Package()
        assert pkg.role is ModuleRole.LIBRARY
        assert not pkg.is_command
        assert not pkg.has_declarations
        assert pkg.notes == {}

    def test_frozen(self, ring_package: Package) -> None:
        with pytest.raises(AttributeError):
            ring_package.funcs = ()  # type: ignore[misc]

    def test_label(self) -> None:
        assert Package(name="ring", import_path="container/ring").label == "container/ring"
        assert Package(name="ring").label == "ring"

    def test_without_declarations(self, ring_package: Package) -> None:
        stripped = ring_package.without_declarations()
        assert stripped is not ring_package
        assert (stripped.consts, stripped.vars, stripped.funcs, stripped.types, stripped.examples) == (
            (),
            (),
            (),
            (),
            (),
        )
        assert stripped.doc == ring_package.doc
        assert stripped.notes == ring_package.notes
        assert ring_package.has_declarations
        assert len(ring_package.examples) == 1


class TestNodes:
    def test_location_is_keyword_only(self) -> None:
        decl = Decl("func F()", location=SourceLocation(3, source_file="f.go"))
        assert decl.text == "func F()"
        assert str(decl.location) == "f.go:3:1"

    def test_location_without_file(self) -> None:
        assert str(SourceLocation(7, 2)) == "7:2"
