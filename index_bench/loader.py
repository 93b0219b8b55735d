"""Suite configuration and scenario loader for index-bench."""

from __future__ import annotations

import importlib.util
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any

import yaml

from .errors import ConfigurationError
from .random_stream import DEFAULT_SEED

CONFIG_FILE = "suite.yaml"


@dataclass
class SuiteConfig:
    """Build settings shared by every scenario in a suite."""

    seed: int = DEFAULT_SEED
    document_count: int = 100
    array_size: int = 100
    database: str = "index_bench"
    collection: str = "wildcard_index"


def load_config(path: Path | None) -> SuiteConfig:
    """Load suite configuration from a YAML file.

    A missing ``path`` (``None``) gives the defaults.
    """
    if path is None:
        return SuiteConfig()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    return _parse_config(data or {})


def _parse_config(data: dict[str, Any]) -> SuiteConfig:
    """Parse raw YAML data into SuiteConfig."""
    if not isinstance(data, dict):
        raise ConfigurationError("Suite config must be a mapping")

    defaults = SuiteConfig()
    return SuiteConfig(
        seed=_get_typed(data, "seed", int, defaults.seed),
        document_count=_get_typed(data, "document_count", int, defaults.document_count),
        array_size=_get_typed(data, "array_size", int, defaults.array_size),
        database=_get_typed(data, "database", str, defaults.database),
        collection=_get_typed(data, "collection", str, defaults.collection),
    )


def _get_typed(data: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = data.get(key, default)
    # bool is an int subclass; reject it for numeric settings
    if not isinstance(value, expected) or isinstance(value, bool):
        raise ConfigurationError(
            f"Config key '{key}' must be {expected.__name__}, got {value!r}"
        )
    return value


def find_config(scenarios_dir: Path) -> Path | None:
    """Return the suite.yaml beside the scenarios, if there is one."""
    candidate = scenarios_dir / CONFIG_FILE
    return candidate if candidate.exists() else None


def find_scenarios(scenarios_dir: Path) -> list[Path]:
    """Find scenario files, in the order they are built."""
    if not scenarios_dir.is_dir():
        raise FileNotFoundError(f"Scenarios directory not found: {scenarios_dir}")
    return sorted(
        path
        for path in scenarios_dir.glob("*.py")
        if not path.name.startswith("_")
    )


def load_scenario(scenario_file: Path) -> ModuleType:
    """Dynamically load a scenario module and check it defines register()."""
    # Create a unique module name
    module_name = f"index_bench_scenario_{scenario_file.stem}"

    spec = importlib.util.spec_from_file_location(module_name, scenario_file)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load scenario from {scenario_file}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)

    if not callable(getattr(module, "register", None)):
        raise ImportError(f"register() not found in {scenario_file}")

    return module
