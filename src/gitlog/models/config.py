"""Configuration models."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_FORMATS = ("plain", "markdown", "json")


class GeneratorConfig(BaseModel):
    """Configuration for a single changelog generation run."""

    report_title: str = Field("Changelog", description="Title passed to every renderer header")
    include_commits_after: Optional[datetime] = Field(
        None,
        description="Only commits strictly newer than this are reported (None means all)",
    )
    skip_tags: bool = Field(False, description="Do not associate tags with commits")
    exclude_merge_commits: bool = Field(False, description="Leave merge commits out of the report")
    exclude_message_patterns: List[str] = Field(
        default_factory=list,
        description="Regular expressions; commits whose message matches any are left out",
    )
    include_authors: List[str] = Field(
        default_factory=list,
        description="Only commits by these author names or emails are reported (empty means everyone)",
    )
    exclude_authors: List[str] = Field(
        default_factory=list,
        description="Commits by these author names or emails are left out",
    )
    output_directory: Path = Field(Path("."), description="Directory the report files are written to")
    formats: List[str] = Field(
        default_factory=lambda: ["plain"],
        description="Report formats to write: plain, markdown, json",
    )

    @field_validator("formats")
    @classmethod
    def check_formats(cls, value: List[str]) -> List[str]:
        unknown = [fmt for fmt in value if fmt not in SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(f"Unsupported report format(s): {', '.join(unknown)}")
        return value

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "report_title": "My Project Changelog",
                "include_commits_after": "2024-01-01T00:00:00Z",
                "skip_tags": False,
                "exclude_merge_commits": True,
                "exclude_message_patterns": [r"^\[release\]"],
                "output_directory": "./build",
                "formats": ["plain", "markdown"],
            }
        }


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are prefixed with GITLOG_ (e.g., GITLOG_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="GITLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Report defaults
    report_title: str = "Changelog"
    output_directory: Path = Path(".")
    skip_tags: bool = False

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False
