"""Protocol data model.

Importing this package registers every variant hierarchy and freezes the
discriminator tables.
"""

from __future__ import annotations

from types import ModuleType as _ModuleType

from ..registry import freeze_all
from .backgrounds import *  # noqa: F401,F403
from .boosts import *  # noqa: F401,F403
from .common import *  # noqa: F401,F403
from .media import *  # noqa: F401,F403
from .message import *  # noqa: F401,F403
from .origins import *  # noqa: F401,F403
from .passport import *  # noqa: F401,F403
from .reactions import *  # noqa: F401,F403

freeze_all()

__all__ = [
    name
    for name, value in globals().items()
    if not name.startswith("_")
    and not isinstance(value, _ModuleType)
    and name not in {"annotations", "freeze_all"}
]


def type_catalog() -> dict[str, type]:
    """Map public class names to protocol classes and hierarchy roots."""
    return {
        name: value
        for name, value in globals().items()
        if isinstance(value, type) and name in __all__
    }
