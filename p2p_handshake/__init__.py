"""P2P handshake trigger and connection descriptor handling."""

from .connection_data import P2PConnectionData, P2PParseError, accept_connection_offer  # noqa: F401
from .trigger import (  # noqa: F401
    TRIGGER_PREFIX,
    build_p2p_trigger,
    extract_encrypted_payload,
    is_valid_p2p_trigger,
)
