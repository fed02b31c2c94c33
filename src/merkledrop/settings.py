from __future__ import annotations
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", alias="MERKLEDROP_LOG_LEVEL")

    # Entrypoint hashed into reference-compatible leaves when none is given
    entrypoint: str = Field(
        default="claim_from_forwarder", alias="MERKLEDROP_ENTRYPOINT"
    )

    # Where CLI results land when no --out path is passed
    output_dir: str = Field(default=".", alias="MERKLEDROP_OUTPUT_DIR")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()  # load at import
