"""
DarkThrone API - typed Python client for the Dark Throne Reborn REST API.

The core is a generic request executor: a request descriptor is encoded,
sent over HTTP and decoded into the caller's declared response type. The
endpoint groups (auth, players, training, banking, structures) are thin
configuration on top of it.
"""

from darkthrone._version import __version__
from darkthrone.api.models import (
    BankDepositRequest,
    BankResponse,
    BankWithdrawRequest,
    CreatePlayerRequest,
    LoginRequest,
    Player,
    RegisterRequest,
    TrainUnitsRequest,
    Unit,
    UnitRequest,
    UntrainUnitsRequest,
    WarHistory,
)
from darkthrone.client import DarkThroneClient
from darkthrone.config.settings import DEFAULT_BASE_URL
from darkthrone.core import ApiRequest, Session, execute, mapping, mapping_ref, plain
from darkthrone.exceptions import (
    ConfigurationError,
    DarkThroneError,
    DecodeError,
    NonSuccessStatusError,
    SerializationError,
    SessionUninitializedError,
    TransportError,
)

__all__ = [
    "__version__",
    "DEFAULT_BASE_URL",
    # client
    "DarkThroneClient",
    "Session",
    # core
    "ApiRequest",
    "execute",
    "mapping",
    "mapping_ref",
    "plain",
    # models
    "BankDepositRequest",
    "BankResponse",
    "BankWithdrawRequest",
    "CreatePlayerRequest",
    "LoginRequest",
    "Player",
    "RegisterRequest",
    "TrainUnitsRequest",
    "Unit",
    "UnitRequest",
    "UntrainUnitsRequest",
    "WarHistory",
    # errors
    "ConfigurationError",
    "DarkThroneError",
    "DecodeError",
    "NonSuccessStatusError",
    "SerializationError",
    "SessionUninitializedError",
    "TransportError",
]
