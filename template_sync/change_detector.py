import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".ejs"


def get_changed_files(base: str = "HEAD^", head: str = "HEAD", cwd: Optional[str] = None) -> List[str]:
    """
    Lists the template files that differ between two commits, in git's order.

    Returns an empty list when the diff cannot be produced (no parent commit,
    shallow clone, git missing) so the run simply finds nothing to do.
    """
    try:
        result = subprocess.run(
            ["git", "-c", "core.quotePath=false", "diff", "--name-only", base, head],
            cwd=cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"Error getting changed files: git exited with {e.returncode}: {(e.stderr or '').strip()}")
        return []
    except OSError as e:
        logger.error(f"Error getting changed files: {e}")
        return []

    return [line for line in result.stdout.split("\n") if line.endswith(TEMPLATE_EXTENSION)]
