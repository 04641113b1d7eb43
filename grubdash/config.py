from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "GrubDash API"
    log_level: str = "INFO"
    first_record_id: int = 1  # ids are handed out from here, per store, never reused
    cors_origins: list[str] = ["*"]

    # uvicorn bind address for `python -m grubdash.main`
    host: str = "0.0.0.0"
    port: int = 5000

    class Config:
        env_file = ".env"
        env_prefix = "GRUBDASH_"
        extra = "ignore"


settings = Settings()
