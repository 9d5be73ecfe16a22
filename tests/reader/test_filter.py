"""Tests for name-based pruning of the documentation model."""

from __future__ import annotations

from gopkgdoc.reader import exclude_prefix, filter_package
from tests._fixtures.gopath_builder import GoPathBuilder

SOURCE = """
package filtered

type Suite struct{}

func (Suite) TestRun() {}

func (Suite) Run() {}

func NewSuite() *Suite { return nil }

func TestNewSuite() *Suite { return nil }

type TestCase struct{}

const TestMode, Mode = 1, 2

const Other = 3

func TestMain() {}

func Main() {}
"""


def test_exclude_prefix_rejects_prefixed_names() -> None:
    keep = exclude_prefix("Test")

    assert keep("RealFoo") is True
    assert keep("TestFoo") is False
    assert keep("Testing") is False
    assert exclude_prefix("")("TestFoo") is True


def test_filter_package_prunes_every_level(gopath: GoPathBuilder) -> None:
    package = gopath.read("filtered", SOURCE)

    filtered = filter_package(package, exclude_prefix())

    assert [typ.name for typ in filtered.types] == ["Suite"]
    [suite] = filtered.types
    assert [method.name for method in suite.methods] == ["Run"]
    assert [func.name for func in suite.funcs] == ["NewSuite"]
    assert [func.name for func in filtered.funcs] == ["Main"]
    assert [value.names for value in filtered.consts] == [["Other"]]


def test_filter_package_leaves_input_untouched(gopath: GoPathBuilder) -> None:
    package = gopath.read("filtered", SOURCE)

    filter_package(package, exclude_prefix())

    assert [typ.name for typ in package.types] == ["Suite", "TestCase"]
    assert [func.name for func in package.funcs] == ["Main", "TestMain"]
    assert len(package.types[0].methods) == 2


def test_filter_package_is_idempotent(gopath: GoPathBuilder) -> None:
    keep = exclude_prefix()
    once = filter_package(gopath.read("filtered", SOURCE), keep)

    twice = filter_package(once, keep)

    assert twice == once
    assert [typ.name for typ in twice.types] == ["Suite"]
    assert [value.names for value in twice.consts] == [["Other"]]
