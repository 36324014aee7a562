"""Storage collaborator for survey forms.

The update path only needs two calls: a conditional field update addressed by
id and a lookup by id. ``SqlSurveyFormCollection`` provides them over a
SQLAlchemy session factory; it holds no per-request state and is shared by
all requests.
"""
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from survey_service.core.errors import StorageUnavailable
from survey_service.models import SurveyForm

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class UpdateResult:
    matched_count: int

class SurveyFormCollection(Protocol):
    def update_by_id(self, survey_id: str, fields: dict[str, Any]) -> UpdateResult: ...

    def find_by_id(self, survey_id: str) -> SurveyForm | None: ...

class SqlSurveyFormCollection:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def update_by_id(self, survey_id: str, fields: dict[str, Any]) -> UpdateResult:
        # single statement, committed or rolled back as a whole; never inserts
        stmt = update(SurveyForm).where(SurveyForm.id == survey_id).values(**fields)
        try:
            with self._session_factory.begin() as session:
                res = session.execute(stmt)
                matched = res.rowcount
        except SQLAlchemyError as e:
            raise StorageUnavailable(str(e)) from e
        return UpdateResult(matched_count=matched)

    def find_by_id(self, survey_id: str) -> SurveyForm | None:
        try:
            with self._session_factory() as session:
                return session.get(SurveyForm, survey_id)
        except SQLAlchemyError as e:
            raise StorageUnavailable(str(e)) from e
