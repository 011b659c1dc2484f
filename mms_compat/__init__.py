"""Platform-version compatibility layer for sending and receiving MMS."""

from .strategies import (  # noqa: F401
    KITKAT,
    LOLLIPOP,
    MARSHMALLOW,
    MAX_OPERATION_TIMEOUT_MS,
    MIN_OPERATION_TIMEOUT_MS,
    NOUGAT,
    OREO,
    MmsFeatureFlags,
    MmsReceivingStrategy,
    MmsSendingStrategy,
    StrategyTier,
    get_feature_flags,
    get_mms_operation_timeout,
    get_receiving_strategy,
    get_sending_strategy,
    is_sms_manager_mms_api_available,
    is_transaction_architecture_supported,
    needs_reflection_access,
)
from .transport import MmsTransport, UnavailableTransport  # noqa: F401
