"""
degiro-core: private-API client for the DEGIRO web trader.

Session handling, endpoint discovery, positional-array position decoding and
portfolio valuation. No order placement, no quote streaming.
"""

__version__ = "0.1.0"

from degiro_core.account import Account, ServiceConfig
from degiro_core.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    DegiroError,
    MalformedConfig,
    MalformedResponse,
    MissingField,
    NetworkError,
    SessionExpired,
    UnknownProduct,
)
from degiro_core.portfolio import Portfolio, PositionProduct, assemble
from degiro_core.position import Position
from degiro_core.product import Product
from degiro_core.session import Session, SessionLoad, SessionLoadKind, SessionStore
from degiro_core.settings import Settings

__all__ = [
    "Account",
    "ServiceConfig",
    "Session",
    "SessionLoad",
    "SessionLoadKind",
    "SessionStore",
    "Settings",
    "Position",
    "Product",
    "PositionProduct",
    "Portfolio",
    "assemble",
    "DegiroError",
    "ConfigurationError",
    "AuthenticationError",
    "SessionExpired",
    "ApiError",
    "NetworkError",
    "MalformedResponse",
    "MalformedConfig",
    "MissingField",
    "UnknownProduct",
]
