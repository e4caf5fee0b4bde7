from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Map Configuration
    default_map_width: int = Field(default=70, gt=0, description="Default map width")
    default_map_height: int = Field(default=35, gt=0, description="Default map height")
    max_map_width: int = Field(default=2000, gt=0, description="Max allowed map width")
    max_map_height: int = Field(default=2000, gt=0, description="Max allowed map height")

    # Generation Configuration
    default_seed: int = Field(default=42, description="Seed used by generators unless reconfigured")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    class Config:
        env_prefix = "PY_TERRAIN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
