"""
Pydantic models for the song source configuration.
Provides validation for the authentication descriptor handed over by the host.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator


class AuthConfig(BaseModel):
    """Authentication descriptor for the YouTube Data API."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    type: Literal["key", "oauth"] = "key"
    key: str = ""
    token: str = ""

    @model_validator(mode="after")
    def validate_credential(self) -> "AuthConfig":
        """Ensures the credential matching the selected mode is present."""
        if self.type == "key" and not self.key:
            raise ValueError("An API key is required when auth type is 'key'.")
        if self.type == "oauth" and not self.token:
            raise ValueError("A token is required when auth type is 'oauth'.")
        return self

    @property
    def query_params(self) -> dict[str, str]:
        """Query parameters to attach to every API request."""
        return {"key": self.key} if self.type == "key" else {}

    @property
    def headers(self) -> dict[str, str]:
        """HTTP headers to attach to every API request."""
        if self.type == "oauth":
            return {"Authorization": f"Bearer {self.token}"}
        return {}


class SourceConfig(BaseModel):
    """A validated configuration model for the song source."""

    model_config = ConfigDict(frozen=True)

    auth: AuthConfig
