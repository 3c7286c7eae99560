import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EnterpriseConfig(BaseModel):
    """Per-enterprise settings loaded from a config file next to a template."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    enterprise_id: Optional[str] = Field(None, alias="enterpriseId", description="Tenant id; defaults to the template's directory name.")
    base_url: Optional[str] = Field(None, alias="baseUrl", description="Ingestion endpoint the template is POSTed to.")
    auth_token: Optional[str] = Field(None, alias="authToken", description="Bearer credential for the endpoint.")


class TemplatePayload(BaseModel):
    """Request body sent to the ingestion endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    enterprise_id: str = Field(..., alias="enterpriseId")
    template_name: str = Field(..., alias="templateName")
    template_content: str = Field(..., alias="templateContent")


class PublisherDefaults(BaseModel):
    """Process-wide fallbacks used when an enterprise config omits a setting."""
    api_url: Optional[str] = None
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "PublisherDefaults":
        return cls(api_url=os.getenv("DEFAULT_API_URL"), api_key=os.getenv("API_KEY"))
