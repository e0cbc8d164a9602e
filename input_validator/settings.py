from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    debug: bool = False
    json_logs: bool = True
    # Ignore an explicit handle_errors=False, as the original library did
    force_error_handling: bool = False
    rules_dir: str = ""  # empty -> bundled input_validator/config

    class Config:
        env_prefix = "INPUT_VALIDATOR_"
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
