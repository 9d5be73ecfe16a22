"""Configuration loading for gopkgdoc (.gopkgdoc.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".gopkgdoc.yml"

PACKAGE_SELECTION_LAST = "last"
PACKAGE_SELECTION_STRICT = "strict"
_PACKAGE_SELECTIONS = (PACKAGE_SELECTION_LAST, PACKAGE_SELECTION_STRICT)


@dataclass
class ExtractConfig:
    """Settings shared by the locator, parser, filter and position resolver."""

    roots: List[Path] = field(default_factory=list)
    source_dir: str = "src"
    test_prefix: str = "Test"
    package_selection: str = PACKAGE_SELECTION_LAST
    config_file: Optional[Path] = None


def load_config(
    config_path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> ExtractConfig:
    """Load configuration from disk, falling back to GOPATH for source roots."""
    env = os.environ if environ is None else environ
    config_file = _resolve_config_path(config_path or Path.cwd())

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)
    else:
        config_file = None

    base = config_file.parent if config_file is not None else Path.cwd()
    roots = [_resolve_root(base, entry) for entry in _as_str_list(data.get("roots"))]
    if not roots:
        roots = default_roots(env)

    selection = _as_str(data.get("package_selection")) or PACKAGE_SELECTION_LAST
    if selection not in _PACKAGE_SELECTIONS:
        raise ConfigError(
            f"package_selection must be one of {', '.join(_PACKAGE_SELECTIONS)}, got {selection!r}"
        )

    return ExtractConfig(
        roots=roots,
        source_dir=_as_str(data.get("source_dir")) or "src",
        test_prefix=_as_str(data.get("test_prefix")) or "Test",
        package_selection=selection,
        config_file=config_file,
    )


def default_roots(environ: Mapping[str, str]) -> List[Path]:
    """Return the GOPATH entries, or ``~/go`` when GOPATH is unset."""
    gopath = environ.get("GOPATH", "")
    entries = [entry for entry in gopath.split(os.pathsep) if entry.strip()]
    if entries:
        return [Path(entry).expanduser() for entry in entries]
    return [Path.home() / "go"]


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).absolute()
    return config_path.absolute()


def _resolve_root(base: Path, entry: str) -> Path:
    root = Path(entry).expanduser()
    if not root.is_absolute():
        root = base / root
    return root


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    """One-line summary of a YAML error: the problem and where it was found."""
    problem = getattr(exc, "problem", None) or str(exc).strip().split("\n", 1)[0]
    mark = getattr(exc, "problem_mark", None)
    if mark is None:
        return problem
    return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {_describe_yaml_error(exc)}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ExtractConfig",
    "PACKAGE_SELECTION_LAST",
    "PACKAGE_SELECTION_STRICT",
    "default_roots",
    "load_config",
]
