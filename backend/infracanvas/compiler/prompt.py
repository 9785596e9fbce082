import json
from typing import Union

from infracanvas.catalog import Provider, as_provider
from infracanvas.ir.plan import Plan

_TARGETS = {
    Provider.AWS: "AWS",
    Provider.GCP: "Google Cloud",
}


def render_plan_prompt(plan: Plan, provider: Union[str, Provider] = Provider.AWS) -> str:
    """
    Human-readable plan: generator instructions followed by the plan JSON.
    Kept for printing and debugging; the backend consumes the payload, not this.
    """
    target = _TARGETS[as_provider(provider)]
    plan_json = json.dumps(plan.to_dict(), indent=2)
    return "\n".join(
        [
            f"You are a Terraform generator. Output ONLY valid Terraform HCL for {target}.",
            "",
            "### Architecture Plan (JSON)",
            plan_json,
            "",
            "### (Prompt preserved for printing / debugging only; backend no longer needs it)",
        ]
    )
