"""Pipeline orchestration: locate, parse, read, filter, export."""

from __future__ import annotations

from pathlib import Path

from .config import ExtractConfig, load_config
from .export import PackageExporter
from .locator import SourceLocator
from .logging import get_logger
from .models import Package, dump_json
from .positions import PositionResolver
from .reader import DocReader, exclude_prefix, filter_package
from .render import DeclarationRenderer
from .syntax import FileSet, SyntaxParser


class Orchestrator:
    """Runs one extraction per call; nothing is kept between runs."""

    def __init__(
        self,
        config: ExtractConfig | None = None,
        *,
        locator: SourceLocator | None = None,
        parser: SyntaxParser | None = None,
        reader: DocReader | None = None,
        renderer: DeclarationRenderer | None = None,
    ) -> None:
        self.config = config or load_config()
        self.locator = locator or SourceLocator(self.config.roots, self.config.source_dir)
        self.parser = parser or SyntaxParser(self.config.package_selection)
        self.reader = reader or DocReader()
        self.renderer = renderer or DeclarationRenderer()
        self.logger = get_logger("orchestrator")

    def run(self, package_id: str) -> Package:
        """Extract the documentation of ``package_id``."""
        directory = self.locator.locate(package_id)
        self.logger.debug("Package %s found at %s", package_id, directory)

        fset = FileSet()
        syntax_package = self.parser.parse_package(str(directory), fset)
        self.logger.debug(
            "Parsed package %s from %d files", syntax_package.name, len(syntax_package.files)
        )

        doc_package = self.reader.read(syntax_package, package_id)
        doc_package = filter_package(doc_package, exclude_prefix(self.config.test_prefix))

        resolver = PositionResolver(fset, self.config.roots, self.config.source_dir)
        exporter = PackageExporter(resolver, self.renderer)
        return exporter.export(doc_package)

    def run_json(self, package_id: str) -> str:
        return dump_json(self.run(package_id))

    @classmethod
    def from_config_path(cls, config_path: Path | None = None) -> "Orchestrator":
        return cls(load_config(config_path))


__all__ = ["Orchestrator"]
