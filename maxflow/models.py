from pydantic import BaseModel, Field, model_validator
from typing import List, Tuple


class Edge(BaseModel):
    u: int = Field(..., ge=0)
    v: int = Field(..., ge=0)
    capacity: int = Field(..., ge=0)


class GraphInput(BaseModel):
    n: int = Field(..., ge=2)
    edges: List[Edge]
    source: int
    sink: int

    @model_validator(mode="after")
    def check_nodes(self):
        for name in ("source", "sink"):
            node = getattr(self, name)
            if not 0 <= node < self.n:
                raise ValueError(f"{name} {node} out of range [0, {self.n})")
        if self.source == self.sink:
            raise ValueError("source and sink must differ")
        for e in self.edges:
            if e.u >= self.n or e.v >= self.n:
                raise ValueError(f"edge ({e.u}, {e.v}) out of range [0, {self.n})")
        return self


class AugmentationLog(BaseModel):
    path: List[int]
    bottleneck: int
    flow_so_far: int


class FlowAssignment(BaseModel):
    u: int
    v: int
    flow: int


class ActiveEdge(FlowAssignment):
    capacity: int


class MinCutOut(BaseModel):
    S: List[int]
    T: List[int]
    edges_S_to_T: List[Tuple[int, int]]


class MaxFlowResponse(BaseModel):
    max_flow: int
    logs: List[AugmentationLog]
    flow_assignments: List[FlowAssignment]
    active_edges: List[ActiveEdge]
    min_cut: MinCutOut
