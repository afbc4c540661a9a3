"""Data Transfer Objects for service layer"""
from typing import Optional, List, Literal
from pydantic import BaseModel, Field

from analysis.aggregation import Metrics
from core.models import Reaction
from table.sorting import DEFAULT_SORT, SortDirection, SortState


class SortStateDTO(BaseModel):
    """Active sort column and direction"""
    column_id: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def from_state(cls, state: Optional[SortState]) -> Optional["SortStateDTO"]:
        if state is None:
            return None
        return cls(column_id=state.column_id, direction=state.direction)

    def to_state(self) -> SortState:
        return SortState(column_id=self.column_id, direction=self.direction)


class MetricsResponseDTO(BaseModel):
    """Metrics snapshot; only produced once reactions were fetched completely"""
    status: Literal["ready"] = "ready"
    metrics: Metrics


class TableRequestDTO(BaseModel):
    """Table view request. An explicit null sort means unsorted"""
    column_order: Optional[List[str]] = None
    sort: Optional[SortStateDTO] = Field(
        default_factory=lambda: SortStateDTO.from_state(DEFAULT_SORT)
    )


class HeaderDTO(BaseModel):
    id: str
    label: str
    sortable: bool
    sorted: Optional[SortDirection] = None


class TableResponseDTO(BaseModel):
    headers: List[HeaderDTO]
    rows: List[Reaction]


class ColumnOrderRequestDTO(BaseModel):
    order: List[str]
    dragged_id: str
    target_id: str


class ColumnOrderResponseDTO(BaseModel):
    order: List[str]


class SortToggleRequestDTO(BaseModel):
    column_id: str
    current: Optional[SortStateDTO] = None


class SortToggleResponseDTO(BaseModel):
    sort: Optional[SortStateDTO] = None


class HealthResponseDTO(BaseModel):
    """Service layer DTO for health check responses"""
    ok: bool = True
    timestamp: Optional[str] = None
    version: Optional[str] = None
