"""
Application configuration
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"

# boto3 reads AWS_* credentials straight from the environment
load_dotenv(env_path, override=False)

class Settings(BaseSettings):
    """Application settings"""
    
    # Basic application configuration
    app_name: str = Field(default="face-distort", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    
    # Server configuration (local webhook mode)
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    
    # Log configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_max_size: int = Field(default=10485760, alias="LOG_MAX_SIZE")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    model_config = {
        "env_file": env_path,
        "env_file_encoding": "utf-8",
        "extra": "allow"
    }


settings = Settings()
