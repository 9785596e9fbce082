# IR module
# Canvas snapshot (input), Plan (intermediate) and DeployPayload (wire) models

from infracanvas.ir.graph import CanvasGraph, GraphEdge, GraphNode, Position, ServiceConfig
from infracanvas.ir.plan import Plan, PlanEdge, PlanNode
from infracanvas.ir.payload import DeployEdge, DeployNode, DeployPayload

__all__ = [
    "CanvasGraph",
    "GraphEdge",
    "GraphNode",
    "Position",
    "ServiceConfig",
    "Plan",
    "PlanEdge",
    "PlanNode",
    "DeployEdge",
    "DeployNode",
    "DeployPayload",
]
