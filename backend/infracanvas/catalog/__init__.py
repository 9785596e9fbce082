# Resource kind catalog: static visual type / plan type / wire kind tables

from infracanvas.catalog.kinds import (
    Family,
    Intent,
    PlanNodeType,
    Provider,
    ResourceKind,
    as_plan_type,
    as_provider,
    family_of,
    kind_of,
    native_kind_of,
    parse_kind,
    plan_type_of,
    wire_kind,
)

__all__ = [
    "Family",
    "Intent",
    "PlanNodeType",
    "Provider",
    "ResourceKind",
    "as_plan_type",
    "as_provider",
    "family_of",
    "kind_of",
    "native_kind_of",
    "parse_kind",
    "plan_type_of",
    "wire_kind",
]
