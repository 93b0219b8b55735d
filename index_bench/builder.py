"""Top-level build entry point: scenarios in, one populated registry out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .loader import SuiteConfig, find_config, find_scenarios, load_config, load_scenario
from .random_stream import RandomStream
from .registry import Registry

logger = logging.getLogger(__name__)


@dataclass
class BuildContext:
    """Everything a scenario's ``register`` function may use."""

    registry: Registry
    rng: RandomStream
    config: SuiteConfig


def build_suite(
    scenarios_dir: Path,
    config: SuiteConfig | None = None,
) -> Registry:
    """Run every scenario in ``scenarios_dir`` against a fresh registry.

    The random stream is seeded once here, so two builds with the same seed
    produce identical query lists.

    Args:
        scenarios_dir: Directory holding the scenario files
        config: Suite settings; loaded from ``suite.yaml`` in the directory
            (or defaults) when omitted

    Returns:
        The registry holding every registered case
    """
    scenarios_dir = Path(scenarios_dir)
    if config is None:
        config = load_config(find_config(scenarios_dir))

    context = BuildContext(
        registry=Registry(),
        rng=RandomStream(config.seed),
        config=config,
    )

    for scenario_file in find_scenarios(scenarios_dir):
        module = load_scenario(scenario_file)
        before = len(context.registry)
        module.register(context)
        logger.info(
            "Loaded %s: %d case(s)",
            scenario_file.name,
            len(context.registry) - before,
        )

    return context.registry
