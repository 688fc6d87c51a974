"""
Seeding run parameters.

Object count, batch size and vector dimension for an import run, read from
NUM_OBJECTS, BATCH_SIZE and VECTOR_SIZE. Values are validated up front so a
typo never silently turns into zero.

Dependencies: pydantic, pydantic_settings
System role: Run parameter configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SeedingSettings(BaseSettings):
    """Parameters for a single seeding run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    num_objects: int = Field(default=1000, gt=0, description="Number of records to generate")
    batch_size: int = Field(default=100, gt=0, description="Objects per batch write")
    vector_size: int = Field(default=384, gt=0, description="Embedding vector dimension")
