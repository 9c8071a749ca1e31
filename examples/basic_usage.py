"""
Basic usage of task_priority: a consumer that orders its work by priority.
Run from the project root: python examples/basic_usage.py
"""

import logging
import os
import sys

# Add src/ to the path to import task_priority without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from task_priority import Priority
from task_priority.config.settings import get_config


LOGGER = logging.getLogger("basic_usage")


def run_pending(work: list[tuple[str, Priority]]):
    """Run work items, most urgent first, in submission order within a priority."""
    for name, priority in sorted(work, key=lambda item: item[1], reverse=True):
        if priority >= Priority.highest_async():
            LOGGER.info("Running %s on the foreground pool (%s)", name, priority)
        elif priority.is_known:
            LOGGER.info("Running %s on the background pool (%s)", name, priority)
        else:
            LOGGER.warning("Running %s with no known priority", name)


if __name__ == "__main__":
    config = get_config()
    config.setup_logging()

    run_pending([
        ("index_documents", Priority.BACKGROUND),
        ("render_preview", Priority.USER_INITIATED),
        ("export_report", config.priority.default),
        ("legacy_job", Priority.UNKNOWN),
    ])
