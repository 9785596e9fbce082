from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import structlog

from infracanvas.catalog import Provider, as_provider
from infracanvas.compiler.payload import build_deploy_payload
from infracanvas.compiler.plan import build_plan
from infracanvas.compiler.prompt import render_plan_prompt
from infracanvas.errors import GraphValidationError
from infracanvas.ir import CanvasGraph, DeployPayload, Plan
from infracanvas.validation import validate_all_services

log = structlog.get_logger(__name__)


@dataclass
class CompilationResult:
    plan: Plan
    payload: DeployPayload
    prompt: str
    errors: Dict[str, List[str]] = field(default_factory=dict)  # validator output, node id -> messages


def compile_graph(
    graph: CanvasGraph,
    provider: Union[str, Provider] = Provider.AWS,
    project: Optional[str] = None,
    env: Optional[str] = None,
    validate: bool = True,
) -> CompilationResult:
    """
    Validate, plan and build the deployment payload for one canvas snapshot.
    Rebuilt from scratch on every call so no stale state leaks between actions.
    """
    provider = as_provider(provider)
    errors = validate_all_services(graph.nodes)
    if validate and errors:
        log.info("compile_blocked", services=len(errors))
        raise GraphValidationError(errors)

    plan = build_plan(graph, provider)
    payload = build_deploy_payload(plan, provider, project=project, env=env)
    return CompilationResult(
        plan=plan,
        payload=payload,
        prompt=render_plan_prompt(plan, provider),
        errors=errors,
    )


__all__ = [
    "CompilationResult",
    "build_deploy_payload",
    "build_plan",
    "compile_graph",
    "render_plan_prompt",
]
