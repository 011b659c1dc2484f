"""Version-dependent selection of MMS send/receive strategies and feature flags.

Selection is a pure function of a platform-version ordinal. Sending and
receiving share one tier table, so both strategies picked for the same
version always report the same ``strategy_name``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from mms_pdu import NotificationInd, PduFormatError, SendReq, decode_pdu, encode_pdu
from mms_shared.config import DEFAULT_PLATFORM_VERSION
from mms_shared.logging_config import log

from .transport import MmsTransport, UnavailableTransport

# Platform version ordinals
KITKAT = 19
LOLLIPOP = 21
MARSHMALLOW = 23
NOUGAT = 24
OREO = 26

MIN_OPERATION_TIMEOUT_MS = 60_000
MAX_OPERATION_TIMEOUT_MS = 300_000


class StrategyTier(Enum):
    """Version tiers, lowest first: (strategy name, minimum version, has fallback transport)."""

    PRE_KITKAT = ("PreKitKat", 0, False)
    KITKAT = ("KitKat", KITKAT, False)
    LOLLIPOP_AND_ABOVE = ("LollipopAndAbove", LOLLIPOP, True)

    def __init__(self, strategy_name: str, min_version: int, uses_fallback: bool):
        self.strategy_name = strategy_name
        self.min_version = min_version
        self.uses_fallback = uses_fallback

    @classmethod
    def for_version(cls, version: int) -> "StrategyTier":
        version = _check_version(version)
        for tier in reversed(list(cls)):
            if version >= tier.min_version:
                return tier
        return cls.PRE_KITKAT


@dataclass(frozen=True)
class MmsFeatureFlags:
    """Snapshot of MMS capabilities for one platform version."""

    supports_group_mms: bool
    supports_delivery_reports: bool
    supports_read_reports: bool
    supports_rich_content: bool
    supports_large_messages: bool
    requires_special_permissions: bool


class MmsSendingStrategy(ABC):
    """Capability interface for sending a SendReq."""

    strategy_name: str

    @abstractmethod
    def is_available(self) -> bool:
        """Return True when some transport could accept a PDU right now."""

    @abstractmethod
    def send_mms(self, send_req: SendReq) -> bool:
        """Send the request; False means nothing was sent and another path may be tried."""


class MmsReceivingStrategy(ABC):
    """Capability interface for handling an incoming notification PDU."""

    strategy_name: str

    @abstractmethod
    def is_auto_download_supported(self) -> bool:
        """Return True when notifications trigger an automatic download."""

    @abstractmethod
    def handle_mms_notification(self, pdu_data: bytes) -> bool:
        """Process raw notification bytes; False when nothing was handled."""


class _TransportStrategy:
    """Shared transport chain for one tier: primary, then fallback on newer tiers."""

    def __init__(self, tier: StrategyTier, transport: Optional[MmsTransport], fallback: Optional[MmsTransport]):
        self.tier = tier
        self.strategy_name = tier.strategy_name
        self._transports: List[MmsTransport] = [transport or UnavailableTransport()]
        if tier.uses_fallback and fallback is not None:
            self._transports.append(fallback)

    def _available_transports(self) -> List[MmsTransport]:
        available = []
        for transport in self._transports:
            try:
                if transport.is_available():
                    available.append(transport)
            except Exception as exc:  # noqa: BLE001
                log.warning("%s: availability check of %s failed: %s", self.strategy_name, transport.name, exc)
        return available

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._transports)
        return f"{type(self).__name__}({self.strategy_name}, transports=[{names}])"


class TransportSendingStrategy(_TransportStrategy, MmsSendingStrategy):
    """Encodes a SendReq and offers it to each available transport in turn."""

    def is_available(self) -> bool:
        return bool(self._available_transports())

    def send_mms(self, send_req: SendReq) -> bool:
        """Encode and send ``send_req``.

        Args:
            send_req: The request to send.

        Returns:
            bool: True once a transport accepted the PDU, False if none did.

        Raises:
            TypeError: If ``send_req`` is not a SendReq.
        """
        if not isinstance(send_req, SendReq):
            raise TypeError(f"send_mms expects a SendReq, got {type(send_req).__name__}")
        pdu_bytes = encode_pdu(send_req)

        for transport in self._available_transports():
            try:
                if transport.send_pdu(pdu_bytes):
                    log.info("%s: sent %d byte SendReq via %s", self.strategy_name, len(pdu_bytes), transport.name)
                    return True
            except Exception as exc:  # noqa: BLE001
                log.warning("%s: transport %s failed: %s", self.strategy_name, transport.name, exc)
                continue
            log.debug("%s: transport %s declined the PDU", self.strategy_name, transport.name)
        log.info("%s: SendReq not sent; no transport accepted it", self.strategy_name)
        return False


class TransportReceivingStrategy(_TransportStrategy, MmsReceivingStrategy):
    """Decodes NotificationInd bytes and starts the download on a transport."""

    def is_auto_download_supported(self) -> bool:
        return True

    def handle_mms_notification(self, pdu_data: bytes) -> bool:
        """Decode a notification and hand it to the first transport that takes it.

        Raises:
            TypeError: If ``pdu_data`` is not bytes-like.
        """
        if not isinstance(pdu_data, (bytes, bytearray, memoryview)):
            raise TypeError(f"handle_mms_notification expects bytes, got {type(pdu_data).__name__}")
        try:
            pdu = decode_pdu(bytes(pdu_data))
        except PduFormatError as exc:
            log.warning("%s: ignoring undecodable notification: %s", self.strategy_name, exc)
            return False
        if not isinstance(pdu, NotificationInd):
            log.warning("%s: expected a NotificationInd, got %s", self.strategy_name, type(pdu).__name__)
            return False

        for transport in self._available_transports():
            try:
                if transport.start_download(pdu):
                    log.info("%s: download started via %s", self.strategy_name, transport.name)
                    return True
            except Exception as exc:  # noqa: BLE001
                log.warning("%s: transport %s failed: %s", self.strategy_name, transport.name, exc)
        log.info("%s: notification not handled; no transport available", self.strategy_name)
        return False


def get_sending_strategy(
    version: int,
    transport: Optional[MmsTransport] = None,
    fallback: Optional[MmsTransport] = None,
) -> MmsSendingStrategy:
    """Return the sending strategy for a platform version.

    Args:
        version: Platform-version ordinal.
        transport: Primary transport; defaults to :class:`UnavailableTransport`.
        fallback: Secondary transport, used from Lollipop upwards.

    Returns:
        MmsSendingStrategy: Strategy named after the version tier.
    """
    return TransportSendingStrategy(StrategyTier.for_version(version), transport, fallback)


def get_receiving_strategy(
    version: int,
    transport: Optional[MmsTransport] = None,
    fallback: Optional[MmsTransport] = None,
) -> MmsReceivingStrategy:
    """Return the receiving strategy for a platform version (same tier as sending)."""
    return TransportReceivingStrategy(StrategyTier.for_version(version), transport, fallback)


def get_feature_flags(version: int) -> MmsFeatureFlags:
    version = _check_version(version)
    return MmsFeatureFlags(
        supports_group_mms=True,
        supports_delivery_reports=True,
        supports_read_reports=True,
        supports_rich_content=True,
        supports_large_messages=version >= KITKAT,
        requires_special_permissions=version >= MARSHMALLOW,
    )


def is_transaction_architecture_supported() -> bool:
    return True


def is_sms_manager_mms_api_available(version: int) -> bool:
    return _check_version(version) >= LOLLIPOP


def needs_reflection_access(version: int) -> bool:
    return _check_version(version) < LOLLIPOP


def get_mms_operation_timeout(version: Optional[int] = None, override_ms: Optional[int] = None) -> int:
    """Return the MMS operation timeout in milliseconds.

    Args:
        version: Platform-version ordinal; defaults to the configured default.
        override_ms: Configured override, clamped to the allowed range.

    Returns:
        int: Timeout within ``[MIN_OPERATION_TIMEOUT_MS, MAX_OPERATION_TIMEOUT_MS]``.
    """
    if override_ms is not None:
        clamped = min(max(int(override_ms), MIN_OPERATION_TIMEOUT_MS), MAX_OPERATION_TIMEOUT_MS)
        if clamped != override_ms:
            log.warning("MMS operation timeout %s ms clamped to %s ms", override_ms, clamped)
        return clamped

    version = _check_version(DEFAULT_PLATFORM_VERSION if version is None else version)
    if version >= OREO:
        return 90_000
    if version >= LOLLIPOP:
        return 120_000
    return 180_000


def _check_version(version: int) -> int:
    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError(f"Platform version must be an int, got {type(version).__name__}")
    return version
