"""Front Desk - hotel room board, booking workflow and daily summaries"""

__version__ = "0.1.0"

# Core abstractions
from .base_config import FrontDeskConfig

# Exceptions
from .exceptions import (
    FrontDeskError,
    ConfigurationError,
    DatabaseError,
    AdapterError,
    BookingError,
    PaymentError,
    DataIntegrityError,
)

# Config management
from .config import get_config, set_config

# Models
from .models import Room, Booking, Payment, RoomView

# Adapters
from .adapters.base import FrontDeskAdapter
from .adapters.sqlite_adapter import SQLiteFrontDeskAdapter
from .runtime import get_adapter, set_adapter

# Services
from .services import (
    BookingService,
    DashboardService,
    DashboardSnapshot,
    resolve_room_views,
)

__all__ = [
    # Version
    "__version__",

    # Core
    "FrontDeskConfig",

    # Exceptions
    "FrontDeskError",
    "ConfigurationError",
    "DatabaseError",
    "AdapterError",
    "BookingError",
    "PaymentError",
    "DataIntegrityError",

    # Config
    "get_config",
    "set_config",

    # Models
    "Room",
    "Booking",
    "Payment",
    "RoomView",

    # Adapters
    "FrontDeskAdapter",
    "SQLiteFrontDeskAdapter",
    "get_adapter",
    "set_adapter",

    # Services
    "BookingService",
    "DashboardService",
    "DashboardSnapshot",
    "resolve_room_views",
]
