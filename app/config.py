from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = "dev"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    github_token: str = ""
    repo_workdir: str = ".tmp-repos"
    clone_depth: int = 1
    max_file_bytes: int = 1024 * 1024

    rate_limit: str = "20/minute"
    cors_origins: str = "http://localhost:5000,http://127.0.0.1:5000,http://localhost:5173,http://127.0.0.1:5173"


settings = Settings()
