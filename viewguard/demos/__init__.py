"""Standalone demonstrations, each runnable with ``python -m``."""

from viewguard.demos import builder_mutation, unmodifiable_view

DEMOS = {
    "unmodifiable-view": unmodifiable_view.run,
    "builder-mutation": builder_mutation.run,
}

__all__ = ["DEMOS", "builder_mutation", "unmodifiable_view"]
