"""Helper utilities for writing Go packages into a temporary GOPATH in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from gopkgdoc.config import ExtractConfig
from gopkgdoc.models import Package
from gopkgdoc.orchestrator import Orchestrator
from gopkgdoc.reader import DocReader
from gopkgdoc.reader.model import DocPackage
from gopkgdoc.syntax import FileSet, SyntaxPackage, SyntaxParser


class GoPathBuilder:
    """Utility for writing Go sources under ``<root>/src`` and extracting them."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "gopath"
        (self.root / "src").mkdir(parents=True)

    def write(self, package_id: str, files: Mapping[str, str]) -> Path:
        """Write `filename -> contents` entries into the package directory."""
        directory = self.package_dir(package_id)
        directory.mkdir(parents=True, exist_ok=True)
        for name, content in files.items():
            normalised = textwrap.dedent(content).lstrip("\n")
            (directory / name).write_text(normalised, encoding="utf-8")
        return directory

    def package_dir(self, package_id: str) -> Path:
        return self.root / "src" / package_id

    def config(self, **overrides: object) -> ExtractConfig:
        """Return a configuration whose only source root is this GOPATH."""
        config = ExtractConfig(roots=[self.root])
        for key, value in overrides.items():
            setattr(config, key, value)
        return config

    def parse(self, package_id: str, source: str | None = None) -> SyntaxPackage:
        """Parse the package, writing ``source`` as ``<last element>.go`` first when given."""
        if source is not None:
            self.write(package_id, {f"{package_id.rsplit('/', 1)[-1]}.go": source})
        return SyntaxParser().parse_package(str(self.package_dir(package_id)), FileSet())

    def read(self, package_id: str, source: str | None = None) -> DocPackage:
        """Build the unfiltered documentation model of the package."""
        return DocReader().read(self.parse(package_id, source), package_id)

    def extract(self, package_id: str, **overrides: object) -> Package:
        """Run the full pipeline on ``package_id``."""
        return Orchestrator(self.config(**overrides)).run(package_id)


__all__ = ["GoPathBuilder"]
