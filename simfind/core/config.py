"""Configuration module for simfind."""

import os
from typing import List
from pydantic import BaseModel, Field, ConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config(BaseModel):
    """Configuration for consecutive-word similarity detection."""

    # Matching settings
    min_words: int = Field(
        default_factory=lambda: int(os.getenv("SIMFIND_MIN_WORDS", "3")),
        ge=1,
        description="Minimum number of identical consecutive words that make up a match"
    )

    # Display settings
    max_display_matches: int = Field(
        default_factory=lambda: int(os.getenv("SIMFIND_MAX_DISPLAY_MATCHES", "10")),
        ge=1,
        description="Maximum number of matches shown in the console and text report"
    )

    # File reading settings
    encodings: List[str] = Field(
        default_factory=lambda: ["utf-8", "cp1252", "latin-1"],
        description="Encodings tried after the detected one when reading files"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid"
    )
