from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional, List


class BmiComputeRequest(BaseModel):
    """Schema for a BMI submission"""
    # Optional here so missing values are rejected by the evaluator (InvalidInput)
    weight: Optional[float] = None  # kg
    height: Optional[float] = None  # Unit per BMI_HEIGHT_UNIT (cm by default)
    permit: bool = False  # Opt in to storing this submission


class BmiComputeResponse(BaseModel):
    owner: str
    bmi: float
    bmi_display: int  # Truncated, as shown in messages
    category: str
    messages: List[str]
    persisted: bool


class BmiRecordResponse(BaseModel):
    """Schema for a stored BMI record"""
    owner: str
    weight: float
    height: float
    bmi: float
    category: str


class BmiRecordSummary(BaseModel):
    owner: str
    summary: str


class BmiRecordDeleteResponse(BaseModel):
    deleted: bool
    messages: List[str]


class AppUserCreate(BaseModel):
    u_name: Optional[str] = None


class AppUserResponse(BaseModel):
    id: int
    uid: str
    u_name: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
