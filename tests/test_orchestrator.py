"""End-to-end tests for gopkgdoc.orchestrator."""

from __future__ import annotations

import os

import pytest

from gopkgdoc.config import PACKAGE_SELECTION_STRICT
from gopkgdoc.errors import AmbiguousPackageError, NoPackageError, NotFoundError
from gopkgdoc.models import Package
from tests._fixtures.gopath_builder import GoPathBuilder

SHAPES = """
// Package shapes computes areas.
package shapes

import (
	"fmt"
	"math"
)

// Unit is a length unit.
type Unit int

// Supported units.
const (
	Meter Unit = iota
	Foot
)

// Shape is anything with an area.
type Shape interface {
	Area() float64
}

// Circle is a round shape.
type Circle struct {
	Radius float64
	name   string
}

// NewCircle returns a circle of radius r.
func NewCircle(r float64) *Circle { return &Circle{Radius: r} }

// Area reports the area of c.
func (c *Circle) Area() float64 { return math.Pi * c.Radius * c.Radius }

func (c *Circle) String() string { return fmt.Sprint(c.Radius) }

// TestHelper is not part of the API.
func TestHelper() {}

// RealHelper is.
func RealHelper() {}

// MaxSize bounds every shape.
var MaxSize = 100

func helper() {}

// BUG(rsc): Area ignores units.
"""


@pytest.fixture
def shapes(gopath: GoPathBuilder) -> Package:
    gopath.write("example.com/shapes", {"shapes.go": SHAPES})
    return gopath.extract("example.com/shapes")


def test_package_header(shapes: Package) -> None:
    assert shapes.name == "shapes"
    assert shapes.import_path == "example.com/shapes"
    assert shapes.doc == "Package shapes computes areas.\n"
    assert shapes.imports == ["fmt", "math"]
    assert shapes.filenames == [os.path.join("example.com", "shapes", "shapes.go")]


def test_functions_with_test_prefix_are_dropped(shapes: Package) -> None:
    assert [func.name for func in shapes.funcs] == ["RealHelper"]
    assert shapes.funcs[0].decl == "func RealHelper()"
    assert shapes.funcs[0].doc == "RealHelper is.\n"


def test_types_are_sorted_and_carry_members(shapes: Package) -> None:
    assert [typ.name for typ in shapes.types] == ["Circle", "Shape", "Unit"]
    circle, shape, unit = shapes.types

    assert circle.doc == "Circle is a round shape.\n"
    assert circle.decl == (
        "type Circle struct {\n"
        "\tRadius float64\n"
        "\t// contains filtered or unexported fields\n"
        "}"
    )
    assert [func.name for func in circle.funcs] == ["NewCircle"]
    assert circle.funcs[0].decl == "func NewCircle(r float64) *Circle"
    assert [method.name for method in circle.methods] == ["Area", "String"]
    assert circle.methods[0].decl == "func (c *Circle) Area() float64"
    assert circle.methods[0].recv == "*Circle"
    assert circle.methods[1].doc == ""

    assert shape.decl == "type Shape interface {\n\tArea() float64\n}"
    assert unit.decl == "type Unit int"


def test_typed_constants_are_listed_under_their_type(shapes: Package) -> None:
    unit = shapes.types[2]

    assert shapes.consts == []
    assert len(unit.consts) == 1
    value = unit.consts[0]
    assert value.names == ["Meter", "Foot"]
    assert value.doc == "Supported units.\n"
    assert value.decl == "const (\n\tMeter\tUnit\t= iota\n\tFoot\n)"


def test_package_vars(shapes: Package) -> None:
    assert [value.names for value in shapes.vars] == [["MaxSize"]]
    assert shapes.vars[0].decl == "var MaxSize = 100"


def test_bug_notes(shapes: Package) -> None:
    assert shapes.bugs == ["Area ignores units.\n"]
    [note] = shapes.notes["BUG"]
    assert note.uid == "rsc"
    assert note.body == "Area ignores units.\n"


def test_positions_are_one_based_and_root_relative(gopath: GoPathBuilder) -> None:
    gopath.write(
        "pos",
        {
            "pos.go": """
            package pos

            // Answer is the answer.
            const Answer = 42
            """
        },
    )

    [value] = gopath.extract("pos").consts

    assert value.pos.start.line == 4
    assert value.pos.start.column == 1
    assert value.pos.end.line == 4
    assert value.pos.end.column == len("const Answer = 42") + 1
    assert value.pos.start.file == os.path.join("pos", "pos.go")


def test_methods_in_other_files_attach_to_their_type(gopath: GoPathBuilder) -> None:
    gopath.write(
        "example.com/multi",
        {
            "a.go": """
            // Package multi spans files.
            package multi

            // Server serves.
            type Server struct{}
            """,
            "b.go": """
            // More package documentation.
            package multi

            // Start starts s.
            func (s *Server) Start() error { return nil }
            """,
            "a_test.go": """
            package multi

            func TestStart(t *testing.T) {}
            """,
        },
    )

    package = gopath.extract("example.com/multi")

    assert package.doc == "Package multi spans files.\n\nMore package documentation.\n"
    assert package.filenames == [
        os.path.join("example.com", "multi", "a.go"),
        os.path.join("example.com", "multi", "b.go"),
    ]
    [server] = package.types
    assert server.decl == "type Server struct{}"
    assert [(method.name, method.recv) for method in server.methods] == [("Start", "*Server")]
    assert server.methods[0].pos.start.file == os.path.join("example.com", "multi", "b.go")
    assert package.funcs == []


def test_embedded_methods_are_promoted(gopath: GoPathBuilder) -> None:
    gopath.write(
        "embed",
        {
            "embed.go": """
            package embed

            // Base provides Close.
            type Base struct{}

            // Close closes.
            func (b *Base) Close() error { return nil }

            // Name names.
            func (b Base) Name() string { return "" }

            // Wrapper embeds Base.
            type Wrapper struct {
            	Base
            }
            """
        },
    )

    package = gopath.extract("embed")

    wrapper = next(typ for typ in package.types if typ.name == "Wrapper")
    assert wrapper.decl == "type Wrapper struct {\n\tBase\n}"
    close_method, name_method = wrapper.methods
    assert (close_method.name, close_method.recv, close_method.orig, close_method.level) == (
        "Close",
        "*Wrapper",
        "*Base",
        1,
    )
    assert close_method.decl == "func (b *Wrapper) Close() error"
    assert (name_method.recv, name_method.orig, name_method.level) == ("Wrapper", "Base", 1)


def test_directory_without_go_files_raises(gopath: GoPathBuilder) -> None:
    gopath.write("empty", {"README.md": "nothing to see"})

    with pytest.raises(NoPackageError):
        gopath.extract("empty")


def test_only_test_packages_raise(gopath: GoPathBuilder) -> None:
    gopath.write("onlytests", {"x_test.go": "package onlytests\n"})

    with pytest.raises(NoPackageError):
        gopath.extract("onlytests")


def test_unknown_package_raises(gopath: GoPathBuilder) -> None:
    with pytest.raises(NotFoundError):
        gopath.extract("nowhere")


def test_last_package_wins_unless_strict(gopath: GoPathBuilder) -> None:
    gopath.write(
        "mixed",
        {
            "a.go": "package alpha\n\n// A is in alpha.\nfunc A() {}\n",
            "b.go": "package beta\n\n// B is in beta.\nfunc B() {}\n",
        },
    )

    package = gopath.extract("mixed")
    assert package.name == "beta"
    assert [func.name for func in package.funcs] == ["B"]

    with pytest.raises(AmbiguousPackageError) as excinfo:
        gopath.extract("mixed", package_selection=PACKAGE_SELECTION_STRICT)
    assert excinfo.value.names == ["alpha", "beta"]


def test_custom_test_prefix(gopath: GoPathBuilder) -> None:
    gopath.write(
        "prefix",
        {"p.go": "package prefix\n\nfunc ExampleRun() {}\n\nfunc TestRun() {}\n"},
    )

    package = gopath.extract("prefix", test_prefix="Example")

    assert [func.name for func in package.funcs] == ["TestRun"]
