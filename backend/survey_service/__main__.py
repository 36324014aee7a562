import uvicorn

from survey_service.core.config import settings

def main() -> None:
    uvicorn.run("survey_service.main:app", host=settings.host, port=settings.port, log_config=None)

if __name__ == "__main__":
    main()
