# agent_parser/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # HTTP adapter
    host: str = "0.0.0.0"
    port: int = 5000

    log_level: str = "INFO"

    # Items accepted in one POST /api/parse request
    max_batch_size: int = 1000

    class Config:
        env_file = ".env"
        env_prefix = "AGENT_PARSER_"


settings = Settings()
