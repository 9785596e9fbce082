from dataclasses import dataclass, field
from typing import Any, Dict, List

from infracanvas.catalog import PlanNodeType


@dataclass
class PlanNode:
    id: str
    type: PlanNodeType
    name: str                                            # sanitized
    props: Dict[str, Any] = field(default_factory=dict)  # raw, not normalized

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "name": self.name,
            "props": dict(self.props),
        }


@dataclass
class PlanEdge:
    type: str                                            # "<src>_to_<tgt>"
    from_id: str
    to_id: str
    props: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "from": self.from_id,
            "to": self.to_id,
            "props": dict(self.props),
        }


@dataclass
class Plan:
    """
    Provider-agnostic snapshot of one canvas graph state.
    Holds plain values only, never references back to canvas objects.
    """
    region: str
    variables: Dict[str, str] = field(default_factory=dict)
    nodes: List[PlanNode] = field(default_factory=list)
    edges: List[PlanEdge] = field(default_factory=list)

    def node(self, node_id: str):
        return next((n for n in self.nodes if n.id == node_id), None)

    def to_dict(self) -> dict:
        return {
            "region": self.region,
            "variables": dict(self.variables),
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
