from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    aws_region: str = "us-west-1"
    signed_url_ttl_seconds: int = 300

    target_language: str = "Chinese"

    llm_provider: str = "openai"
    llm_text_model_name: str = "gpt-3.5-turbo"
    llm_vision_model_name: str = "gpt-4o"
    llm_temperature: float = Field(default=0.2, ge=0.0, le=0.2)
    llm_vision_max_tokens: int = 300

    llm_openai_api_key: str = ""
    llm_openai_timeout_seconds: int = 30

    llm_openai_compatible_base_url: str = ""
    llm_openai_compatible_api_key: str = ""
    llm_openai_compatible_timeout_seconds: int = 30

    llm_openrouter_api_key: str = ""
    llm_groq_api_key: str = ""
    llm_together_api_key: str = ""
    llm_deepseek_api_key: str = ""
    llm_ollama_api_key: str = ""

    persistence_backend: str = "postgres"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "docsummary"
    db_username: str = "docsummary"
    db_password: str = "secret"
    db_pool_min_size: int = Field(default=0, ge=0)
    db_pool_max_size: int = Field(default=2, ge=1)
    db_connect_timeout_seconds: int = 5

    dynamodb_table_name: str = "UserDocumentSummaries"

    graphql_endpoint: str = ""
    graphql_api_key: str = ""
    graphql_timeout_seconds: int = 10
