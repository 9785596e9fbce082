from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Literal, Optional

# ---- Canvas snapshot (input boundary) ----


class Position(BaseModel):
    x: float = 0
    y: float = 0


class ServiceConfig(BaseModel):
    name: str = ""
    description: str = ""
    environment: Literal["development", "staging", "production"] = "development"
    region: str = ""
    details: Dict[str, Any] = Field(default_factory=dict)  # raw, user-entered

    @field_validator("name", "description", "region", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value

    @field_validator("details", mode="before")
    @classmethod
    def _details_as_mapping(cls, value):
        # panels that were never opened leave details unset or as a blank string
        return value if isinstance(value, dict) else {}


class GraphNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    visual_type: str = Field(
        validation_alias=AliasChoices("visual_type", "visualType", "type"),
        serialization_alias="visualType",
    )
    display_label: str = Field(
        default="",
        validation_alias=AliasChoices("display_label", "displayLabel", "label"),
        serialization_alias="displayLabel",
    )
    position: Position = Field(default_factory=Position)
    config: Optional[ServiceConfig] = None

    @property
    def details(self) -> Dict[str, Any]:
        return self.config.details if self.config else {}


class GraphEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source_node_id: str = Field(
        validation_alias=AliasChoices("source_node_id", "sourceNodeId", "source"),
        serialization_alias="sourceNodeId",
    )
    target_node_id: str = Field(
        validation_alias=AliasChoices("target_node_id", "targetNodeId", "target"),
        serialization_alias="targetNodeId",
    )
    extra_props: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("extra_props", "extraProps", "props"),
        serialization_alias="extraProps",
    )

    @field_validator("extra_props", mode="before")
    @classmethod
    def _props_as_mapping(cls, value):
        return value if isinstance(value, dict) else {}


class CanvasGraph(BaseModel):
    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)
