"""Builder mutation demo — changing the builder leaves built values alone.

Usage:
    python -m viewguard.demos.builder_mutation
"""

from __future__ import annotations

import logging

from viewguard.config import DemoConfig, config as default_config
from viewguard.core.person import PersonBuilder
from viewguard.models.reports import DemoReport

logger = logging.getLogger(__name__)

DEMO_NAME = "builder-mutation"


def run(config: DemoConfig | None = None) -> DemoReport:
    """Build a person, add a friend on the builder, render the person twice."""
    config = config or default_config
    logger.info("Running %s demo", DEMO_NAME)

    builder = PersonBuilder()
    builder.set_name(config.person_name)
    for friend in config.friends:
        builder.add_friend(friend)

    person = builder.build()
    before = str(person)

    # Adding a new friend after the object was created
    builder.add_friend(config.late_friend)
    after = str(person)

    return DemoReport(demo=DEMO_NAME, before_render=before, after_render=after)


def main() -> None:
    report = run()
    print(report.before)
    print(report.after)


if __name__ == "__main__":
    main()
