"""Transport collaborator interface used by the send/receive strategies.

The core never talks to a network itself; a host application plugs in an
implementation that moves encoded PDUs to and from the MMSC.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mms_pdu import NotificationInd
from mms_shared.logging_config import log


class MmsTransport(ABC):
    """Abstract carrier for encoded PDUs."""

    name = "transport"

    @abstractmethod
    def is_available(self) -> bool:
        """Return True when the transport can currently move PDUs."""

    @abstractmethod
    def send_pdu(self, pdu_bytes: bytes) -> bool:
        """Hand an encoded SendReq to the MMSC; True when accepted."""

    @abstractmethod
    def start_download(self, notification: NotificationInd) -> bool:
        """Begin retrieving the message a NotificationInd points at."""


class UnavailableTransport(MmsTransport):
    """Default transport: reports itself unavailable and moves nothing."""

    name = "unavailable"

    def is_available(self) -> bool:
        return False

    def send_pdu(self, pdu_bytes: bytes) -> bool:
        log.debug("No MMS transport configured; dropping %d byte PDU", len(pdu_bytes))
        return False

    def start_download(self, notification: NotificationInd) -> bool:
        log.debug("No MMS transport configured; not downloading %r", notification.content_location)
        return False
