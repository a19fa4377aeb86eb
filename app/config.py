from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Chuck Norris Facts"
    api_base_url: str = "https://api.chucknorris.io"
    # Seconds before a request to the facts API is abandoned
    request_timeout: float = 5.0
    log_level: str = "INFO"
    viewer_cookie_name: str = "viewer_id"
    max_viewers: int = 1000
    loading_refresh_seconds: int = 1

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
