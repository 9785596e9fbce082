import json
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Union

from infracanvas.catalog import Intent


class DeployNode(BaseModel):
    id: str
    kind: str
    name: str
    props: Dict[str, Any] = Field(default_factory=dict)  # normalized


class DeployEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_id: str = Field(alias="from")
    to: str
    intent: Intent
    path: Optional[str] = None
    method: Optional[str] = None
    batch_size: Optional[Union[int, float]] = Field(default=None, alias="batchSize")


class DeployPayload(BaseModel):
    project: str
    env: str
    region: str
    location: Optional[str] = None  # gcp only
    nodes: List[DeployNode] = Field(default_factory=list)
    edges: List[DeployEdge] = Field(default_factory=list)

    def to_wire(self) -> dict:
        """JSON-ready dict with wire field names; unset optionals are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Canonical serialization, byte-identical for identical payloads."""
        return json.dumps(self.to_wire(), sort_keys=True, separators=(",", ":"))
