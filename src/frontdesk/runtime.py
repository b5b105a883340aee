from __future__ import annotations
from typing import Optional

from frontdesk.adapters.base import FrontDeskAdapter
from frontdesk.config import get_config
from frontdesk.exceptions import AdapterError

# Global adapter instance
_adapter: Optional[FrontDeskAdapter] = None


def get_adapter() -> FrontDeskAdapter:
    """
    Returns the process-wide storage adapter, creating it from the active
    config on first use.
    """
    global _adapter
    if _adapter is None:
        adapter = get_config().create_adapter()
        if not isinstance(adapter, FrontDeskAdapter):
            raise AdapterError(f"{type(adapter).__name__} does not implement FrontDeskAdapter")
        _adapter = adapter
    return _adapter


def set_adapter(adapter: Optional[FrontDeskAdapter]) -> None:
    """Installs a specific adapter instance (handy for tests)."""
    global _adapter
    _adapter = adapter
