"""Configuration for cckgen using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class CckgenConfig(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = {
        "env_prefix": "CCK_",
        "env_file": ".env",
        "extra": "ignore",
    }

    input_path: str = "input.csv"
    output_path: str = "output.txt"
    header: bool = True  # first row of the csv is a header
    encoding: str = "utf-8"

    # "first_seen" keeps the order fixture ids appear in the input,
    # "id" sorts blocks by fixture id.
    order: Literal["first_seen", "id"] = "first_seen"

    # Render every block before touching the output file.
    buffered_output: bool = False


def get_config() -> CckgenConfig:
    """Load configuration from environment."""
    return CckgenConfig()
