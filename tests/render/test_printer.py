"""Tests for gofmt-style declaration rendering."""

from __future__ import annotations

from gopkgdoc.reader.model import DocPackage, DocType
from gopkgdoc.render import FILTERED_FIELDS, FILTERED_METHODS, DeclarationRenderer
from tests._fixtures.gopath_builder import GoPathBuilder

SOURCE = """
package render

type Config struct {
	MaximumRetries int    // x
	N              string // y
	secret         string
}

type Store interface {
	Get(key string) ([]byte, error)
	put(key string)
}

type Point struct{ X, Y int }

type Empty struct{}

type Alias = Point

var (
	// Timeout applies to all calls.
	Timeout time.Duration = 5
	Limit   = 10 // max
)

const Mask = 1<<3 - 1

func Copy(dst, src []byte, n ...int) (written int64, err error) { return }

func Wrap() (error) { return nil }

func (p *Point) Move(dx, dy int) { p.X += dx }
"""


def _read(gopath: GoPathBuilder) -> DocPackage:
    return gopath.read("render", SOURCE)


def _type(package: DocPackage, name: str) -> DocType:
    return next(typ for typ in package.types if typ.name == name)


def test_struct_fields_and_comments_align(gopath: GoPathBuilder) -> None:
    decl = _type(_read(gopath), "Config").decl

    assert DeclarationRenderer().render_type(decl) == (
        "type Config struct {\n"
        "\tMaximumRetries\tint\t// x\n"
        "\tN\t\tstring\t// y\n"
        f"\t{FILTERED_FIELDS}\n"
        "}"
    )


def test_unfiltered_struct_keeps_unexported_fields(gopath: GoPathBuilder) -> None:
    decl = _type(_read(gopath), "Config").decl

    rendered = DeclarationRenderer(exported_only=False).render_type(decl)

    assert FILTERED_FIELDS not in rendered
    assert "\tsecret\t\tstring\n" in rendered


def test_interface_hides_unexported_methods(gopath: GoPathBuilder) -> None:
    decl = _type(_read(gopath), "Store").decl

    assert DeclarationRenderer().render_type(decl) == (
        "type Store interface {\n"
        "\tGet(key string) ([]byte, error)\n"
        f"\t{FILTERED_METHODS}\n"
        "}"
    )


def test_small_types_stay_on_one_line(gopath: GoPathBuilder) -> None:
    package = _read(gopath)
    renderer = DeclarationRenderer()

    assert renderer.render_type(_type(package, "Point").decl) == "type Point struct{ X, Y int }"
    assert renderer.render_type(_type(package, "Empty").decl) == "type Empty struct{}"
    assert renderer.render_type(_type(package, "Alias").decl) == "type Alias = Point"


def test_grouped_values_use_columns(gopath: GoPathBuilder) -> None:
    [value] = _read(gopath).vars

    assert DeclarationRenderer().render_value(value.decl) == (
        "var (\n"
        "\t// Timeout applies to all calls.\n"
        "\tTimeout\ttime.Duration\t= 5\n"
        "\tLimit\t\t\t= 10\t// max\n"
        ")"
    )


def test_binary_expressions_use_gofmt_spacing(gopath: GoPathBuilder) -> None:
    [value] = _read(gopath).consts

    assert DeclarationRenderer().render_value(value.decl) == "const Mask = 1<<3 - 1"


def test_function_signatures_omit_bodies(gopath: GoPathBuilder) -> None:
    package = _read(gopath)
    renderer = DeclarationRenderer()
    funcs = {func.name: func for func in package.funcs}

    assert renderer.render_func(funcs["Copy"].decl) == (
        "func Copy(dst, src []byte, n ...int) (written int64, err error)"
    )
    assert renderer.render_func(funcs["Wrap"].decl) == "func Wrap() error"

    [move] = _type(package, "Point").methods
    assert renderer.render_func(move.decl) == "func (p *Point) Move(dx, dy int)"


def test_trailing_line_comment_keeps_its_newline(gopath: GoPathBuilder) -> None:
    package = gopath.read(
        "trailing",
        """
        package trailing

        const One = 1 // one

        var V = 1 /* block */

        type T int // tee
        """,
    )
    renderer = DeclarationRenderer()

    [one] = package.consts
    [v] = package.vars
    [tee] = package.types
    assert renderer.render_value(one.decl) == "const One = 1\t// one\n"
    assert renderer.render_value(v.decl) == "var V = 1\t/* block */\n"
    assert renderer.render_type(tee.decl) == "type T int\t// tee\n"


def test_rendering_is_deterministic(gopath: GoPathBuilder) -> None:
    package = _read(gopath)
    renderer = DeclarationRenderer()
    decl = _type(package, "Config").decl

    first = renderer.render_type(decl)
    assert renderer.render_type(decl) == first
    assert DeclarationRenderer().render_type(_type(_read(gopath), "Config").decl) == first


def test_long_operator_chains_render(gopath: GoPathBuilder) -> None:
    terms = " + ".join(['"x"'] * 1000)
    package = gopath.read("chain", f"package chain\n\nconst S = {terms}\n")

    [value] = package.consts
    assert DeclarationRenderer().render_value(value.decl) == f"const S = {terms}"
