import logging
from pathlib import Path
from typing import Any

import httpx

from .change_detector import TEMPLATE_EXTENSION
from .errors import PublishError
from .models import EnterpriseConfig, PublisherDefaults, TemplatePayload

logger = logging.getLogger(__name__)


def template_name_for(template_path: str) -> str:
    name = Path(template_path).name
    if name.endswith(TEMPLATE_EXTENSION) and name != TEMPLATE_EXTENSION:
        return name[: -len(TEMPLATE_EXTENSION)]
    return name


def enterprise_id_for(template_path: str, config: EnterpriseConfig) -> str:
    """Config value first, else the name of the directory holding the template."""
    return config.enterprise_id or Path(template_path).absolute().parent.name


async def update_template(
    template_path: str,
    config: EnterpriseConfig,
    defaults: PublisherDefaults,
    client: httpx.AsyncClient,
) -> Any:
    """
    Pushes one template's content to its enterprise's ingestion endpoint.

    Returns the decoded response body. Any failure is logged and raised as
    PublishError; nothing is retried.
    """
    try:
        template_content = Path(template_path).read_text(encoding="utf-8", errors="replace")
        template_name = template_name_for(template_path)
        enterprise_id = enterprise_id_for(template_path, config)

        api_url = config.base_url or defaults.api_url
        if not api_url:
            raise PublishError(f"No API base URL found for {enterprise_id}")
        auth_token = config.auth_token or defaults.api_key or ""

        payload = TemplatePayload(
            enterprise_id=enterprise_id,
            template_name=template_name,
            template_content=template_content,
        )
        logger.debug(f"POST {api_url} for template '{template_name}' ({len(template_content)} chars)")

        response = await client.post(
            api_url,
            json=payload.model_dump(by_alias=True),
            headers={
                "Content-Type": "application/json",
                # An empty token must not leave trailing whitespace in the header value.
                "Authorization": f"Bearer {auth_token}".strip(),
            },
        )
        response.raise_for_status()

        logger.info(f"Successfully updated template {template_name} for enterprise {enterprise_id}")
        try:
            return response.json()
        except ValueError:
            return response.text

    except PublishError as e:
        logger.error(f"Error updating template {template_path}: {e}")
        raise
    except httpx.HTTPStatusError as e:
        logger.error(f"Error updating template {template_path}: {e}")
        if e.response.text:
            logger.error(f"API response: {e.response.text}")
        raise PublishError(f"Endpoint rejected template {template_path} with HTTP {e.response.status_code}") from e
    except (httpx.HTTPError, OSError) as e:
        logger.error(f"Error updating template {template_path}: {e}")
        raise PublishError(f"Failed to publish template {template_path}: {e}") from e
