"""Shared API dependencies, the single import point for all routers.

Re-exports the FrontDesk container and authentication dependencies so that
router modules can import everything they need from one place::

    from frontdesk.api.deps import get_current_user, get_front_desk
"""

from frontdesk.auth.dependencies import (
    get_current_user,
    require_admin,
)
from frontdesk.services.front_desk import FrontDesk, get_front_desk

__all__ = [
    "FrontDesk",
    "get_front_desk",
    "get_current_user",
    "require_admin",
]
