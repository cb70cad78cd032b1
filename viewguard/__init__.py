"""Viewguard: read-only views and builder snapshots, demonstrated.

Two small demonstrations of what "immutable" does and does not mean:
  - A read-only view is a window onto a mutable list, not a frozen copy
  - A builder stays mutable after ``build()``, but the values it already
    built never see its later changes
"""

__version__ = "0.1.0"
__description__ = "Read-only views vs. defensive copies, demonstrated"

from viewguard.core.person import Person, PersonBuilder
from viewguard.core.readonly_view import ReadOnlyList, UnsupportedOperationError, wrap

__all__ = [
    "Person",
    "PersonBuilder",
    "ReadOnlyList",
    "UnsupportedOperationError",
    "wrap",
    "__version__",
]
