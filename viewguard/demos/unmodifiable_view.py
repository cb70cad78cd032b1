"""Unmodifiable view demo — the view follows its backing list.

Usage:
    python -m viewguard.demos.unmodifiable_view
"""

from __future__ import annotations

import logging

from viewguard.config import DemoConfig, config as default_config
from viewguard.core.readonly_view import wrap
from viewguard.models.reports import DemoReport

logger = logging.getLogger(__name__)

DEMO_NAME = "unmodifiable-view"


def run(config: DemoConfig | None = None) -> DemoReport:
    """Wrap a list, grow the list, and render the view before and after."""
    config = config or default_config
    logger.info("Running %s demo", DEMO_NAME)

    modifiable: list[str] = []
    modifiable.extend(config.initial_words)

    unmodifiable = wrap(modifiable)
    before = str(unmodifiable)

    # Mutate the backing list, not the view
    for word in config.appended_words:
        modifiable.append(word)

    after = str(unmodifiable)
    return DemoReport(demo=DEMO_NAME, before_render=before, after_render=after)


def main() -> None:
    report = run()
    print(report.before)
    print(report.after)


if __name__ == "__main__":
    main()
