from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    plan_store_backend: str = "file"
    runtime_data_dir: str = "data/system"
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "learnpath"

    llm_provider: str = "openrouter"
    llm_model: str = "qwen/qwen-2.5-coder-32b-instruct:free"
    openrouter_api_key: str = ""
    openrouter_url: str = "https://openrouter.ai/api/v1/chat/completions"
    llm_http_referer: str = "http://localhost:3000"
    llm_app_title: str = "Learning Plan Generator"
    llm_timeout_seconds: float = 45.0
    llm_max_retries: int = 2
    llm_retry_base_delay_seconds: float = 2.0
    llm_max_tokens: int = 4000
    ai_roadmaps_enabled: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
