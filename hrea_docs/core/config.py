"""
Configuration management
"""

from __future__ import annotations

import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Any

from .constants import (
    CLASSES_PER_MODULE,
    CONFIG_FILE_NAME,
    DEFAULT_MUTATIONS_DIR,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_QUERIES_DIR,
    DEFAULT_RESOLVERS_PATH,
    DEFAULT_SCHEMA_PATHS,
    EXCLUDED_MODULES,
    INDEX_FILE_NAME,
    SOURCE_SUFFIX,
)
from .errors import ConfigError


def _default_modules() -> dict[str, list[str]]:
    return {name: list(classes) for name, classes in CLASSES_PER_MODULE.items()}


@dataclass
class Config:
    """Generator config"""

    # Paths
    resolvers_path: Path = Path(DEFAULT_RESOLVERS_PATH)
    queries_dir: str = DEFAULT_QUERIES_DIR
    mutations_dir: str = DEFAULT_MUTATIONS_DIR
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)

    # Schema sources
    schema_paths: list[Path] = field(
        default_factory=lambda: [Path(p) for p in DEFAULT_SCHEMA_PATHS]
    )
    extension_paths: list[Path] = field(default_factory=list)

    # Scanning
    index_file: str = INDEX_FILE_NAME
    source_suffix: str = SOURCE_SUFFIX

    # Module table
    modules: dict[str, list[str]] = field(default_factory=_default_modules)
    excluded_modules: list[str] = field(default_factory=lambda: list(EXCLUDED_MODULES))

    @property
    def queries_path(self) -> Path:
        return self.resolvers_path / self.queries_dir

    @property
    def mutations_path(self) -> Path:
        return self.resolvers_path / self.mutations_dir

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Config:
        """
        Load config from a YAML file.

        Relative paths in the file are resolved against the file's directory.
        A missing file gives the defaults, resolved against the working directory.

        Raises:
            ConfigError: If the file is not valid YAML or has the wrong shape
        """
        if path is None:
            path = Path.cwd() / CONFIG_FILE_NAME

        if not path.exists():
            return cls().resolved(Path.cwd())

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level should be a mapping")

        paths = _section(data, "paths", path)
        schema = _section(data, "schema", path)
        scan = _section(data, "scan", path)

        modules = data.get("modules")
        if modules is None:
            modules = _default_modules()
        elif not isinstance(modules, dict):
            raise ConfigError(f"{path}: 'modules' should map module names to class lists")
        else:
            modules = {str(name): [str(c) for c in (classes or [])] for name, classes in modules.items()}

        config = cls(
            resolvers_path=Path(paths.get("resolvers", DEFAULT_RESOLVERS_PATH)),
            queries_dir=paths.get("queries", DEFAULT_QUERIES_DIR),
            mutations_dir=paths.get("mutations", DEFAULT_MUTATIONS_DIR),
            output_path=Path(paths.get("output", DEFAULT_OUTPUT_PATH)),
            schema_paths=[Path(p) for p in _as_list(schema.get("files", list(DEFAULT_SCHEMA_PATHS)))],
            extension_paths=[Path(p) for p in _as_list(schema.get("extensions", []))],
            index_file=scan.get("index_file", INDEX_FILE_NAME),
            source_suffix=scan.get("suffix", SOURCE_SUFFIX),
            modules=modules,
            excluded_modules=_as_list(data.get("excluded_modules", list(EXCLUDED_MODULES))),
        )
        return config.resolved(path.parent)

    def resolved(self, base: Path) -> Config:
        """Return a copy with all relative paths anchored at base."""
        return Config(
            resolvers_path=_anchor(self.resolvers_path, base),
            queries_dir=self.queries_dir,
            mutations_dir=self.mutations_dir,
            output_path=_anchor(self.output_path, base),
            schema_paths=[_anchor(p, base) for p in self.schema_paths],
            extension_paths=[_anchor(p, base) for p in self.extension_paths],
            index_file=self.index_file,
            source_suffix=self.source_suffix,
            modules={name: list(classes) for name, classes in self.modules.items()},
            excluded_modules=list(self.excluded_modules),
        )


def _section(data: dict, key: str, path: Path) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{path}: '{key}' should be a mapping")
    return value


def _as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _anchor(path: Path, base: Path) -> Path:
    path = Path(path).expanduser()
    return path if path.is_absolute() else (base / path)
