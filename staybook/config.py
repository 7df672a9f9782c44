from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    supabase_url: str
    supabase_key: str
    booking_api_url: str
    lookup_timeout: float = 10.0
    submission_timeout: float = 30.0
    dashboard_timezone: str = ""
    log_level: str = "INFO"
