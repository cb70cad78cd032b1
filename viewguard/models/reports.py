"""Demo report model — what a demonstration rendered before and after."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

BEFORE_PREFIX = "Before modification: "
AFTER_PREFIX = "After modification: "


class DemoReport(BaseModel):
    """Outcome of one demonstration run.

    ``before_render`` and ``after_render`` hold the observed object's
    rendering alone; ``before`` and ``after`` are the console lines.
    """

    model_config = ConfigDict(frozen=True)

    demo: str
    before_render: str
    after_render: str

    @property
    def before(self) -> str:
        return BEFORE_PREFIX + self.before_render

    @property
    def after(self) -> str:
        return AFTER_PREFIX + self.after_render

    @property
    def changed(self) -> bool:
        """Whether the observed object rendered differently after the mutation."""
        return self.before_render != self.after_render

    @property
    def lines(self) -> tuple[str, str]:
        return (self.before, self.after)
