from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool

from survey_service.api.deps import get_survey_forms
from survey_service.core.config import settings
from survey_service.core.errors import StorageUnavailable, SurveyUpdateError
from survey_service.schemas.survey_form import SurveyFormOut, SurveyUpdateOut
from survey_service.services.collection import SurveyFormCollection
from survey_service.services.survey_update import update_survey_form

router = APIRouter(tags=["surveys"])

@router.put("/update-survey", response_model=SurveyUpdateOut)
async def update_survey(request: Request, forms: SurveyFormCollection = Depends(get_survey_forms)):
    body = await request.body()
    role = request.headers.get(settings.role_header)
    try:
        return await run_in_threadpool(
            update_survey_form, body, role, forms, privileged_role=settings.privileged_role
        )
    except SurveyUpdateError as e:
        raise HTTPException(e.status_code, e.message)

@router.options("/update-survey", status_code=204)
def update_survey_options():
    return Response(status_code=204)

@router.get("/surveys/{survey_id}", response_model=SurveyFormOut)
def get_survey(survey_id: str, forms: SurveyFormCollection = Depends(get_survey_forms)):
    try:
        s = forms.find_by_id(survey_id)
    except StorageUnavailable:
        raise HTTPException(500, "Failed to load survey")
    if not s:
        raise HTTPException(404, "Survey not found")
    return s
