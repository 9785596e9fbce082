from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from infracanvas.catalog import Provider
from infracanvas.ir.graph import CanvasGraph


class GraphRequest(BaseModel):
    graph: CanvasGraph
    provider: Provider = Provider.AWS
    project: Optional[str] = None
    env: Optional[str] = None


class ValidateRequest(BaseModel):
    graph: CanvasGraph


class ValidateResponse(BaseModel):
    valid: bool
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)
