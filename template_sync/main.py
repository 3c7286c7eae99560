import asyncio
import logging
import os
import sys
from typing import Optional

import httpx

from .change_detector import get_changed_files
from .config_resolver import find_enterprise_config
from .models import PublisherDefaults
from .publisher import update_template


def resolve_log_level(name: str) -> int:
    """Maps a level name such as 'debug' to its number, INFO when unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))

# --- Logging Setup ---
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


async def update_changed_templates(defaults: PublisherDefaults, client: Optional[httpx.AsyncClient] = None) -> None:
    """
    Publishes every template changed in the latest commit, one at a time.

    Templates without an enterprise config are skipped. The first publish
    failure (or malformed JSON config) propagates and ends the run.
    """
    changed_files = get_changed_files()
    logger.info(f"Found {len(changed_files)} changed EJS templates")

    if not changed_files:
        logger.info("No templates to update")
        return

    if client is None:
        async with httpx.AsyncClient() as own_client:
            await _update_all(changed_files, defaults, own_client)
    else:
        await _update_all(changed_files, defaults, client)

    logger.info("All templates updated successfully")


async def _update_all(changed_files, defaults: PublisherDefaults, client: httpx.AsyncClient) -> None:
    for template_path in changed_files:
        logger.info(f"Processing file: {template_path}")

        config = find_enterprise_config(template_path)
        if config is None:
            logger.error(f"Skipping {template_path}: No enterprise configuration found")
            continue

        await update_template(template_path, config, defaults, client)


def main() -> int:
    """Console entry point; returns the process exit code."""
    defaults = PublisherDefaults.from_env()
    if not defaults.api_url:
        logger.debug("DEFAULT_API_URL not set; every template needs a baseUrl in its config.")

    try:
        asyncio.run(update_changed_templates(defaults))
    except Exception as e:
        logger.error(f"Error in template update process: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
