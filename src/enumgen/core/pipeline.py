"""
Per-type planning pipeline.

Each enum is parsed, resolved, and planned independently: no state is
shared between types and the global configuration is only read, so specs
can be planned from several threads against one shared global config.
A failure for one type never stops the others unless ``fail_fast`` is set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import BaseModel

from .annotation_parser import build_enum_config
from .errors import EnumGenError
from .ir import EnumConfig, EnumSpec, GenerationPlan
from .planner import plan
from .resolver import resolve

logger = logging.getLogger(__name__)


class PipelineSettings(BaseModel):
    """Run-level settings."""

    fail_fast: bool = False


@dataclass
class PlanningReport:
    """
    Result of planning a batch of enum types.

    Attributes:
        plans: Generation plans keyed by type name, in input order
        failures: Errors keyed by type name
    """

    plans: dict[str, GenerationPlan] = field(default_factory=dict)
    failures: dict[str, EnumGenError] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """Whether every type was planned."""
        return len(self.failures) == 0

    def add_plan(self, generation_plan: GenerationPlan) -> None:
        if generation_plan.type_name in self.plans:
            logger.warning("Duplicate enum type %s; keeping the last one", generation_plan.type_name)
        self.plans[generation_plan.type_name] = generation_plan

    def add_failure(self, type_name: str, error: EnumGenError) -> None:
        self.failures[type_name] = error


def plan_enum(spec: EnumSpec, global_config: EnumConfig | None = None) -> GenerationPlan:
    """
    Parse, resolve, and plan a single enum type.

    Raises:
        EnumGenError: Any directive, naming, or conflict error, with the
            type name attached
    """
    local_config = build_enum_config(spec.raw_annotations, type_name=spec.type_name)
    resolved = resolve(global_config or EnumConfig(), local_config)
    return plan(spec, resolved)


def plan_enums(
    specs: Iterable[EnumSpec],
    global_config: EnumConfig | None = None,
    settings: PipelineSettings | None = None,
) -> PlanningReport:
    """
    Plan a batch of enum types.

    Args:
        specs: Enum declarations from the scanner
        global_config: Defaults shared by all types
        settings: Run-level settings

    Returns:
        PlanningReport with one entry per type in either ``plans`` or
        ``failures``
    """
    settings = settings or PipelineSettings()
    global_config = global_config or EnumConfig()
    report = PlanningReport()

    for spec in specs:
        try:
            report.add_plan(plan_enum(spec, global_config))
        except EnumGenError as e:
            if settings.fail_fast:
                raise
            logger.warning("Skipping %s: %s", spec.type_name, e)
            report.add_failure(spec.type_name, e)

    logger.info("Planned %d enum type(s), %d failed", len(report.plans), len(report.failures))
    return report
