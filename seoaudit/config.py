from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "seoaudit"
    VERSION: str = "0.1.0"

    API_V1_STR: str = "/api/v1"

    # Content fetcher
    FETCH_TIMEOUT_SECONDS: float = 10
    FETCH_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.3"
    )
    FETCH_FOLLOW_REDIRECTS: bool = True

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
