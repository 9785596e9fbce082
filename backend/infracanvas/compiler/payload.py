from collections import Counter
from typing import Dict, Optional, Union

import structlog

from infracanvas import config
from infracanvas.catalog import Family, Provider, ResourceKind, as_provider, family_of, wire_kind
from infracanvas.compiler.intents import classify_intent
from infracanvas.compiler.normalize import normalize_props
from infracanvas.compiler.plan import DEFAULT_REGIONS
from infracanvas.ir.payload import DeployEdge, DeployNode, DeployPayload
from infracanvas.ir.plan import Plan, PlanEdge, PlanNode
from infracanvas.ir.props import to_number

log = structlog.get_logger(__name__)

# edge sources that feed a function in batches
BATCH_SOURCES = {Family.QUEUE, Family.TABLE, Family.STREAM}


def _deploy_node(pn: PlanNode, provider: Provider, outgoing: Counter) -> DeployNode:
    kind = wire_kind(pn.type, provider)
    props = normalize_props(kind, pn.props)

    # S3: EventBridge on when the bucket feeds anything, unless set explicitly
    if kind is ResourceKind.AWS_S3 and props.get("eventBridge") is None:
        props["eventBridge"] = outgoing[pn.id] > 0

    return DeployNode(id=pn.id, kind=kind.value, name=pn.name, props=props)


def _deploy_edge(
    pe: PlanEdge,
    index_by_id: Dict[str, PlanNode],
    kinds: Dict[str, ResourceKind],
) -> DeployEdge:
    src = index_by_id.get(pe.from_id)
    tgt = index_by_id.get(pe.to_id)

    # wire kind first, plan type tag when the wire kind is missing
    src_kind = kinds.get(pe.from_id) or (src.type if src else None)
    tgt_kind = kinds.get(pe.to_id) or (tgt.type if tgt else None)

    edge = DeployEdge(
        from_id=pe.from_id,
        to=pe.to_id,
        intent=classify_intent(src_kind, tgt_kind),
    )

    src_family = family_of(src_kind)
    tgt_family = family_of(tgt_kind)

    # API Gateway -> function routes carry path/method
    if src_family is Family.API_GATEWAY and tgt_family is Family.FUNCTION:
        edge.path = str(pe.props.get("path") or "/")
        edge.method = str(pe.props.get("method") or "ANY")

    if src_family in BATCH_SOURCES and tgt_family is Family.FUNCTION:
        batch_size = to_number(pe.props.get("batchSize"))
        if batch_size is not None:
            edge.batch_size = batch_size

    return edge


def build_deploy_payload(
    plan: Plan,
    provider: Union[str, Provider] = Provider.AWS,
    project: Optional[str] = None,
    env: Optional[str] = None,
) -> DeployPayload:
    """
    Turn a Plan into the wire-format IR for *provider*.
    Props are normalized per kind; edges get an intent and route/batch extras.
    """
    provider = as_provider(provider)

    outgoing = Counter(pe.from_id for pe in plan.edges)
    nodes = [_deploy_node(pn, provider, outgoing) for pn in plan.nodes]

    index_by_id = {pn.id: pn for pn in plan.nodes}
    kinds = {n.id: ResourceKind(n.kind) for n in nodes}
    edges = [_deploy_edge(pe, index_by_id, kinds) for pe in plan.edges]

    payload = DeployPayload(
        project=project or config.DEFAULT_PROJECT,
        env=env or config.DEFAULT_ENV,
        region=plan.region or DEFAULT_REGIONS[provider],
        nodes=nodes,
        edges=edges,
    )
    if provider is Provider.GCP:
        payload.location = payload.region

    log.debug(
        "payload_built",
        provider=provider.value,
        region=payload.region,
        nodes=len(nodes),
        edges=len(edges),
    )
    return payload
