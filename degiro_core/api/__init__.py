"""
API layer: HTTP transport, resolvers for each endpoint, and the DegiroClient pipeline.

Authenticator -> ConfigResolver -> AccountResolver -> PositionDecoder -> ProductCatalog.
"""

from degiro_core.api.account import AccountResolver
from degiro_core.api.auth import Authenticator
from degiro_core.api.client import DegiroClient
from degiro_core.api.config import ConfigResolver
from degiro_core.api.http import HttpClient
from degiro_core.api.positions import POSITION_ROW_SCHEMA, PositionDecoder, decode_positions
from degiro_core.api.products import ProductCatalog

__all__ = [
    "Authenticator",
    "ConfigResolver",
    "AccountResolver",
    "PositionDecoder",
    "ProductCatalog",
    "DegiroClient",
    "HttpClient",
    "POSITION_ROW_SCHEMA",
    "decode_positions",
]
