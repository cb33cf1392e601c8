import os


class Settings:
    PROJECT_NAME: str = "vquiz"
    DEBUG: bool = os.environ.get("VQUIZ_DEBUG", "") == "1"
    LOG_DIR: str = os.environ.get("VQUIZ_LOG_DIR", "log")
    LOG_FILE: str = "vquiz.log"
    SESSION_COOKIE_NAME: str = "quiz_session_id"
    SESSION_TIMEOUT_MINUTES: int = 120
    TICK_SECONDS: int = 1
    INPUT_FIELD_ID: str = "answer-input"
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")
    HOST: str = os.environ.get("VQUIZ_HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("VQUIZ_PORT", "8000"))


settings = Settings()
