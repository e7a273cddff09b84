"""
BMI API Endpoints

Evaluates a caller's BMI submission and manages their stored record.
The stored record is written only when the caller grants permission,
and a later permitted submission overwrites it.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError, ValidationError
from core.identity import get_caller_identity
from schemas import (
    BmiComputeRequest,
    BmiComputeResponse,
    BmiRecordDeleteResponse,
    BmiRecordResponse,
    BmiRecordSummary,
)
from services.bmi_evaluator import InvalidInput
from services.bmi_service import delete_record, describe_record, evaluate_and_store
from services.record_store import SqlAlchemyRecordStore

router = APIRouter(prefix="/v1/bmi", tags=["bmi"])


@router.post("/compute", response_model=BmiComputeResponse)
def compute_bmi(
    submission: BmiComputeRequest,
    caller: str = Depends(get_caller_identity),
    db: Session = Depends(get_db)
):
    """
    Compute and classify the caller's BMI.

    With permit=true the submission is stored under the caller's identity,
    replacing any earlier one.
    """
    store = SqlAlchemyRecordStore(db)
    try:
        evaluation = evaluate_and_store(
            owner=caller,
            weight=submission.weight,
            height=submission.height,
            permit=submission.permit,
            store=store,
        )
    except InvalidInput as e:
        raise ValidationError(str(e), field=e.field)

    return BmiComputeResponse(
        owner=caller,
        bmi=evaluation.bmi,
        bmi_display=evaluation.bmi_display,
        category=evaluation.category.value,
        messages=evaluation.messages,
        persisted=evaluation.record is not None,
    )


@router.get("/records/me", response_model=BmiRecordResponse)
def get_my_record(
    caller: str = Depends(get_caller_identity),
    db: Session = Depends(get_db)
):
    """Get the caller's stored record."""
    record = SqlAlchemyRecordStore(db).get(caller)
    if record is None:
        raise NotFoundError("BMI record", caller)
    return BmiRecordResponse(
        owner=record.owner,
        weight=record.weight,
        height=record.height,
        bmi=record.bmi,
        category=record.category.value,
    )


@router.get("/records/{owner}", response_model=BmiRecordSummary)
def get_record_summary(
    owner: str,
    db: Session = Depends(get_db)
):
    """Get the one-line summary of any owner's stored record."""
    summary = describe_record(owner, SqlAlchemyRecordStore(db))
    if summary is None:
        raise NotFoundError("BMI record", owner)
    return BmiRecordSummary(owner=owner, summary=summary)


@router.delete("/records/me", response_model=BmiRecordDeleteResponse)
def delete_my_record(
    permit: bool = False,
    caller: str = Depends(get_caller_identity),
    db: Session = Depends(get_db)
):
    """
    Delete the caller's stored record.

    Nothing is deleted unless permit=true is passed.
    """
    deleted, messages = delete_record(caller, permit, SqlAlchemyRecordStore(db))
    return BmiRecordDeleteResponse(deleted=deleted, messages=messages)
