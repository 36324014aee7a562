from fastapi import Request

from survey_service.services.collection import SurveyFormCollection

def get_survey_forms(request: Request) -> SurveyFormCollection:
    return request.app.state.survey_forms
