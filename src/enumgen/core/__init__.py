"""
enumgen core: directive parsing, configuration resolution, and artifact
planning.
"""

from .annotation_parser import (
    build_enum_config,
    parse_annotation,
    parse_annotations,
    split_directive_line,
)
from .behavior import EnumBehavior, EnumPanic, InvalidEnumValueError
from .config_loader import config_from_mapping, find_config_file, load_global_config
from .naming import derive_identifier, derive_value_names
from .pipeline import PipelineSettings, PlanningReport, plan_enum, plan_enums
from .planner import plan
from .resolver import resolve

__all__ = [
    "build_enum_config",
    "parse_annotation",
    "parse_annotations",
    "split_directive_line",
    "EnumBehavior",
    "EnumPanic",
    "InvalidEnumValueError",
    "config_from_mapping",
    "find_config_file",
    "load_global_config",
    "derive_identifier",
    "derive_value_names",
    "PipelineSettings",
    "PlanningReport",
    "plan_enum",
    "plan_enums",
    "plan",
    "resolve",
]
