"""Canned survey documents and update bodies shared by the tests."""

from datetime import datetime

SURVEY_ID = "65f1c2a9e4b0a1b2c3d4e5f6"
CREATED_AT = datetime(2024, 3, 1, 9, 30)


def survey_doc(**overrides) -> dict:
    doc = {
        "id": SURVEY_ID,
        "title": "Onboarding feedback",
        "description": "First week impressions",
        "questions": [
            {"id": "q1", "text": "How was day one?", "type": "text", "required": True},
            {
                "id": "q2",
                "text": "Pick a team",
                "type": "single_choice",
                "options": ["red", "blue"],
                "required": False,
            },
        ],
        "created_by": "author-1",
        "created_at": CREATED_AT,
        "is_active": False,
    }
    doc.update(overrides)
    return doc


def update_body(**overrides) -> dict:
    body = {
        "id": SURVEY_ID,
        "title": "Onboarding feedback v2",
        "description": "Updated description",
        "questions": [
            {"id": "q3", "text": "Anything else?", "type": "text", "required": False},
            {
                "id": "q1",
                "text": "How was day one?",
                "type": "multiple_choice",
                "options": ["good", "fine", "bad"],
                "required": True,
            },
        ],
        "is_active": True,
    }
    body.update(overrides)
    return body

