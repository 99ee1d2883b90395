from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    recommendation_top_n: int = 12
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
