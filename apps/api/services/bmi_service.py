"""
BMI Service

Runs the evaluator for a caller and carries out its side effects:
- every message is forwarded, in order, to the log sink (this module's logger)
- a permitted submission is written to the record store

Also provides the read and delete operations over stored records.
"""
import logging
from typing import List, Optional, Tuple

from core.bmi_config import BMIConfig
from services.bmi_evaluator import Evaluation, InvalidInput, compute
from services.record_store import RecordStore

logger = logging.getLogger(__name__)

NO_DATA_FOUND = "No Data Found"
DATA_DELETED = "Your Data Is Deleted"
DELETE_NEEDS_PERMISSION = "Kindly accept Permission to delete your Data"


def _emit(owner: str, message: str) -> None:
    logger.info(message, extra={"extra_fields": {"owner": owner}})


def evaluate_and_store(
    owner: str,
    weight,
    height,
    permit: bool,
    store: RecordStore,
    config: Optional[BMIConfig] = None,
) -> Evaluation:
    """
    Evaluate a submission, log its messages, and persist it if permitted.

    InvalidInput propagates unchanged; in that case nothing is logged at
    INFO and nothing is stored.
    """
    try:
        evaluation = compute(weight, height, permit, owner, config)
    except InvalidInput as e:
        logger.warning(
            f"Rejected BMI submission: {e}",
            extra={"extra_fields": {"owner": owner, "field": e.field}},
        )
        raise

    for message in evaluation.messages:
        _emit(owner, message)

    if evaluation.record is not None:
        store.put(owner, evaluation.record)

    return evaluation


def describe_record(owner: str, store: RecordStore) -> Optional[str]:
    """Summary line for a stored record, or None if the owner has none."""
    record = store.get(owner)
    if record is None:
        _emit(owner, NO_DATA_FOUND)
        return None
    return f"BMI Data: {record.bmi} {record.owner}"


def delete_record(owner: str, permit: bool, store: RecordStore) -> Tuple[bool, List[str]]:
    """
    Delete the owner's stored record, but only with permission.

    Returns whether a record was removed and the messages produced;
    the messages are also logged.
    """
    deleted = False
    if not permit:
        messages = [DELETE_NEEDS_PERMISSION]
    else:
        deleted = store.delete(owner)
        messages = [DATA_DELETED]

    for message in messages:
        _emit(owner, message)
    return deleted, messages
