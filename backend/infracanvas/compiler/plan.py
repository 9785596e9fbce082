from typing import Dict, List, Optional, Union

import structlog

from infracanvas.catalog import Family, Provider, as_provider, family_of, plan_type_of
from infracanvas.compiler.naming import sanitize_name
from infracanvas.ir.graph import CanvasGraph, GraphNode
from infracanvas.ir.plan import Plan, PlanEdge, PlanNode

log = structlog.get_logger(__name__)

DEFAULT_REGIONS: Dict[Provider, str] = {
    Provider.AWS: "ap-southeast-2",
    Provider.GCP: "us-central1",
}

# family -> (variable prefix, details field holding the physical name)
VARIABLE_FIELDS = {
    Family.STORAGE: ("bucket", "bucketName"),
    Family.QUEUE: ("queue", "queueName"),
    Family.FUNCTION: ("lambda", "functionName"),
}


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def resolve_region(nodes: List[GraphNode], provider: Union[str, Provider] = Provider.AWS) -> str:
    """First non-blank region in node order, config field before details."""
    for node in nodes:
        if not node.config:
            continue
        region = _text(node.config.region) or _text(node.details.get("region"))
        if region:
            return region
    return DEFAULT_REGIONS[as_provider(provider)]


def _plan_node(node: GraphNode, index: int) -> PlanNode:
    config = node.config
    details = dict(node.details)

    raw_name = (
        (_text(config.name) if config else "")
        or _text(node.display_label)
        or _text(node.id)
    )
    # nothing to name it by: use its position in the graph
    name = sanitize_name(raw_name) if raw_name else f"res-{index}"

    region = (config.region if config else "") or details.get("region") or ""
    props = {"label": node.display_label, "region": region}
    props.update(details)

    return PlanNode(id=node.id, type=plan_type_of(node.visual_type), name=name, props=props)


def _is_storage(node: PlanNode) -> bool:
    return family_of(node.type) is Family.STORAGE


def _variables(nodes: List[PlanNode]) -> Dict[str, str]:
    variables: Dict[str, str] = {}
    for pn in nodes:
        fields = VARIABLE_FIELDS.get(family_of(pn.type))
        if not fields:
            continue
        prefix, name_field = fields
        physical = pn.props.get(name_field)
        variables[f"{prefix}_{pn.id}_name"] = physical if isinstance(physical, str) and physical else pn.name
    return variables


def build_plan(graph: CanvasGraph, provider: Union[str, Provider] = Provider.AWS) -> Plan:
    """
    Walk one canvas snapshot into a Plan.

    - region: first configured region, provider default otherwise
    - nodes: plan type, sanitized name, raw props ({label, region, **details})
    - edges: "<src>_to_<tgt>" type; edges with a missing endpoint are dropped
    - variables: physical-name table for buckets, queues and functions
    """
    region = resolve_region(graph.nodes, provider)
    plan_nodes = [_plan_node(node, i) for i, node in enumerate(graph.nodes)]
    index_by_id: Dict[str, PlanNode] = {pn.id: pn for pn in plan_nodes}

    plan_edges: List[PlanEdge] = []
    for edge in graph.edges:
        src = index_by_id.get(edge.source_node_id)
        tgt = index_by_id.get(edge.target_node_id)
        if not src or not tgt:
            # the canvas is mid-edit; not an error
            log.debug(
                "edge_dropped",
                source=edge.source_node_id,
                target=edge.target_node_id,
            )
            continue

        props = dict(edge.extra_props)
        storage: Optional[PlanNode] = src if _is_storage(src) else tgt if _is_storage(tgt) else None
        if storage:
            for key in ("prefix", "suffix"):
                if key not in props:
                    value = storage.props.get(key)
                    props[key] = "" if value is None else value

        plan_edges.append(
            PlanEdge(
                type=f"{src.type.value}_to_{tgt.type.value}",
                from_id=src.id,
                to_id=tgt.id,
                props=props,
            )
        )

    plan = Plan(
        region=region,
        variables=_variables(plan_nodes),
        nodes=plan_nodes,
        edges=plan_edges,
    )
    log.debug(
        "plan_built",
        region=region,
        nodes=len(plan.nodes),
        edges=len(plan.edges),
        dropped_edges=len(graph.edges) - len(plan.edges),
    )
    return plan
