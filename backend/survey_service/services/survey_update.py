"""Apply a partial update to one stored survey form.

``update_survey_form`` takes the raw request body, the caller's role and the
collection to write to. Checks run in a fixed order and the first failure
wins; the collection is touched only once all of them pass.
"""
import logging

from pydantic import ValidationError

from survey_service.core.config import settings
from survey_service.core.errors import (
    Forbidden,
    MalformedRequest,
    MissingIdentifier,
    NotFound,
    StorageError,
    StorageUnavailable,
)
from survey_service.schemas.survey_form import SurveyFormIn, SurveyUpdateOut
from survey_service.services.collection import SurveyFormCollection

logger = logging.getLogger(__name__)

def decode_survey_form(body: bytes | str) -> SurveyFormIn:
    try:
        return SurveyFormIn.model_validate_json(body)
    except ValidationError as e:
        logger.info("update rejected: malformed body (%d errors)", e.error_count())
        raise MalformedRequest() from e

def update_survey_form(
    body: bytes | str,
    caller_role: str | None,
    collection: SurveyFormCollection,
    privileged_role: str | None = None,
) -> SurveyUpdateOut:
    form = decode_survey_form(body)
    privileged_role = privileged_role or settings.privileged_role

    if not form.id or not form.id.strip():
        logger.info("update rejected: missing survey id")
        raise MissingIdentifier()

    if not caller_role or caller_role != privileged_role:
        logger.info("update rejected for survey %s: role %r not allowed", form.id, caller_role)
        raise Forbidden()

    try:
        res = collection.update_by_id(form.id, form.update_fields())
    except StorageUnavailable as e:
        logger.error("update of survey %s failed", form.id, exc_info=True)
        raise StorageError() from e

    if res.matched_count == 0:
        logger.info("update rejected: survey %s not found", form.id)
        raise NotFound()

    logger.info("survey %s updated", form.id)
    return SurveyUpdateOut(id=form.id)
