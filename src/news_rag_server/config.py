from typing import Optional

from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Shared by the embedding and chat-completion clients
    openai_api_key: SecretStr

    embedding_model: str = "text-embedding-3-small"
    embedding_base_url: str = "https://api.openai.com/v1/embeddings"

    llm_model: str = "gpt-4o-mini"
    llm_base_url: str = "https://api.openai.com/v1/chat/completions"
    llm_temperature: float = 0.7

    # Seconds; None disables the HTTP timeout entirely
    request_timeout: Optional[float] = 60.0

    corpus_path: str = "data/news.json"
    top_k: int = Field(default=3, ge=1)

    warm_embeddings_on_startup: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
