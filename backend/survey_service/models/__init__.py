from survey_service.models.survey_form import SurveyForm

__all__ = ["SurveyForm"]
