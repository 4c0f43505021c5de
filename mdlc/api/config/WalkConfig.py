"""Directory walk configuration."""

from __future__ import annotations

__all__ = ["WalkConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WalkConfig(BaseModel):
    """Which files under a root are treated as Markdown documents."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(
        default_factory=lambda: [".md", ".markdown"],
        description="Markdown file extensions (matched case-insensitively)",
    )
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: [".git", "node_modules", ".venv", "__pycache__"],
        description="Directory names never descended into",
    )
    exclude_globs: list[str] = Field(
        default_factory=list,
        description="fnmatch patterns matched against paths relative to the root",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("extensions must not contain empty entries")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized
