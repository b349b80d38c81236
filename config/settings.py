from typing import List, Optional
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class QuizSettings(BaseSettings):
    catalog_path: Optional[str] = None  # YAML catalog; the built-in catalog is used when unset
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    default_user_name: str = "Friend"

    model_config = SettingsConfigDict(env_prefix='ENERGY_QUIZ_')

# Instantiate settings
quiz_settings = QuizSettings()
