"""Link check configuration."""

from __future__ import annotations

__all__ = ["DEFAULT_IGNORED_SCHEMES", "CheckConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_IGNORED_SCHEMES = ["mailto", "tel", "javascript", "data"]


class CheckConfig(BaseModel):
    """Tuning values consumed by the link checking engine."""

    model_config = ConfigDict(extra="forbid")

    workers: int = Field(8, ge=1, description="Maximum concurrent checks overall")
    per_host_limit: int = Field(2, ge=1, description="Maximum concurrent requests against one remote host")
    timeout_secs: float = Field(10.0, gt=0, description="Timeout for a single HTTP attempt")
    retries: int = Field(2, ge=0, description="Retries after a transient network failure")
    backoff_secs: float = Field(0.5, ge=0, description="Initial retry delay, doubled after each retry")
    run_timeout_secs: float | None = Field(None, gt=0, description="Budget for the whole run, None for no limit")
    project_root: str | None = Field(None, description="Root for links starting with '/', defaults to the checked root")
    ignored_schemes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_SCHEMES),
        description="URL schemes reported as skipped instead of checked",
    )
    check_remote: bool = Field(True, description="Check http/https targets over the network")
    bare_urls: bool = Field(True, description="Treat bare http(s) URLs in text as links")
    user_agent: str = Field("mdlc-linkcheck", description="User-Agent header sent with HTTP requests")

    @field_validator("ignored_schemes")
    @classmethod
    def _lower_schemes(cls, v: list[str]) -> list[str]:
        return [scheme.strip().lower().rstrip(":") for scheme in v if scheme.strip()]

    @field_validator("project_root")
    @classmethod
    def _normalize_project_root(cls, v: str | None) -> str | None:
        from .normalize_path import normalize_path

        if v is None:
            return None
        return str(normalize_path(v))
