"""NTP time source.

This module implements a best-effort, unauthenticated SNTP client
(RFC 4330): one 48-byte request, one response, no retries. The
transmit timestamp of the response becomes the Instant.

Classes:
    NtpTimestamp: 64-bit NTP timestamp (seconds since 1900 + fraction).
    NtpPacket: The 48-byte NTP header, encoded and decoded with struct.
    NtpConfig: Server, port, timeout and protocol version.
    UdpTransport: One UDP socket per query.
    NtpClient: The time source.

Examples:
    >>> from epochal.sources import NtpClient, NtpConfig
    >>> client = NtpClient(NtpConfig(server="time.example.org", timeout=2.0))
    >>> client.config.port
    123
"""

from __future__ import annotations

import logging
import socket
import struct
from dataclasses import dataclass, field
from typing import Callable, Protocol

from epochal._internal.constants import (
    MILLIS_PER_SECOND,
    NTP_DEFAULT_PORT,
    NTP_DEFAULT_SERVER,
    NTP_DEFAULT_TIMEOUT,
    NTP_DEFAULT_VERSION,
    NTP_ERA_PIVOT,
    NTP_ERA_SECONDS,
    NTP_LEAP_UNSYNCHRONIZED,
    NTP_MODE_CLIENT,
    NTP_MODE_SERVER,
    NTP_PACKET_SIZE,
    OFFSET_NTP,
)
from epochal.core.instant import Instant
from epochal.errors import EpochUnderflowError, NtpQueryError, ValidationError
from epochal.units.source import Source

logger = logging.getLogger(__name__)

# LI/VN/mode, stratum, poll, precision, root delay, root dispersion,
# reference id, then four timestamps as (seconds, fraction) pairs
_PACKET_STRUCT = struct.Struct("!BBbbII4s8I")

_FRACTION_SCALE = 2**32


@dataclass(frozen=True)
class NtpTimestamp:
    """A 64-bit NTP timestamp.

    Attributes:
        seconds: Seconds since 1900-01-01, modulo 2**32.
        fraction: Fractional second in units of 2**-32 s.
    """

    seconds: int = 0
    fraction: int = 0

    @property
    def is_zero(self) -> bool:
        return self.seconds == 0 and self.fraction == 0

    def to_instant(self, source: Source = Source.NTP) -> Instant:
        """Convert to an Instant.

        A timestamp with the top bit of ``seconds`` clear is taken to be
        in NTP era 1 (2036-02-07 onwards). The fraction is truncated to
        milliseconds.

        Examples:
            >>> NtpTimestamp(3_692_217_600, 2**31).to_instant().unix_ms()
            1483228800500
        """
        seconds = self.seconds
        if seconds < NTP_ERA_PIVOT:
            seconds += NTP_ERA_SECONDS
        millis = (self.fraction * MILLIS_PER_SECOND) >> 32
        return Instant._from_internal(seconds + OFFSET_NTP, millis, source, 0)

    @classmethod
    def from_instant(cls, instant: Instant) -> NtpTimestamp:
        """Convert an Instant to an NTP timestamp (seconds wrap per era).

        Raises:
            EpochUnderflowError: If the instant predates 1900-01-01.
        """
        if instant.seconds < OFFSET_NTP:
            raise EpochUnderflowError(
                f"instant {instant.pretty()} predates the NTP epoch (1900-01-01)"
            )
        seconds = (instant.seconds - OFFSET_NTP) % NTP_ERA_SECONDS
        fraction = (instant.milliseconds * _FRACTION_SCALE) // MILLIS_PER_SECOND
        return cls(seconds, fraction)


@dataclass(frozen=True)
class NtpPacket:
    """The fixed 48-byte NTP header.

    Examples:
        >>> NtpPacket.request().to_bytes()[:1]
        b'\\x1b'
        >>> len(NtpPacket.request().to_bytes())
        48
    """

    leap: int = 0
    version: int = NTP_DEFAULT_VERSION
    mode: int = NTP_MODE_CLIENT
    stratum: int = 0
    poll: int = 0
    precision: int = 0
    root_delay: int = 0
    root_dispersion: int = 0
    reference_id: bytes = b"\x00\x00\x00\x00"
    reference: NtpTimestamp = field(default_factory=NtpTimestamp)
    originate: NtpTimestamp = field(default_factory=NtpTimestamp)
    receive: NtpTimestamp = field(default_factory=NtpTimestamp)
    transmit: NtpTimestamp = field(default_factory=NtpTimestamp)

    @classmethod
    def request(cls, version: int = NTP_DEFAULT_VERSION) -> NtpPacket:
        """Build a client request: everything zero but version and mode."""
        return cls(version=version, mode=NTP_MODE_CLIENT)

    def to_bytes(self) -> bytes:
        """Encode the packet in network byte order."""
        return _PACKET_STRUCT.pack(
            (self.leap << 6) | (self.version << 3) | self.mode,
            self.stratum,
            self.poll,
            self.precision,
            self.root_delay,
            self.root_dispersion,
            self.reference_id,
            self.reference.seconds,
            self.reference.fraction,
            self.originate.seconds,
            self.originate.fraction,
            self.receive.seconds,
            self.receive.fraction,
            self.transmit.seconds,
            self.transmit.fraction,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> NtpPacket:
        """Decode the 48-byte header at the start of ``data``.

        Trailing extension fields or authenticator bytes are ignored.

        Raises:
            NtpQueryError: If data is shorter than 48 bytes.
        """
        if len(data) < NTP_PACKET_SIZE:
            raise NtpQueryError(
                f"NTP response is {len(data)} bytes, expected at least {NTP_PACKET_SIZE}"
            )
        (
            li_vn_mode,
            stratum,
            poll,
            precision,
            root_delay,
            root_dispersion,
            reference_id,
            ref_s,
            ref_f,
            orig_s,
            orig_f,
            recv_s,
            recv_f,
            tx_s,
            tx_f,
        ) = _PACKET_STRUCT.unpack_from(data)
        return cls(
            leap=li_vn_mode >> 6,
            version=(li_vn_mode >> 3) & 0x7,
            mode=li_vn_mode & 0x7,
            stratum=stratum,
            poll=poll,
            precision=precision,
            root_delay=root_delay,
            root_dispersion=root_dispersion,
            reference_id=reference_id,
            reference=NtpTimestamp(ref_s, ref_f),
            originate=NtpTimestamp(orig_s, orig_f),
            receive=NtpTimestamp(recv_s, recv_f),
            transmit=NtpTimestamp(tx_s, tx_f),
        )


@dataclass(frozen=True)
class NtpConfig:
    """Where and how to query.

    Attributes:
        server: Host name or address of the NTP server.
        port: UDP port.
        timeout: Seconds to wait for the response.
        version: NTP version number sent in the request (1-4).
    """

    server: str = NTP_DEFAULT_SERVER
    port: int = NTP_DEFAULT_PORT
    timeout: float = NTP_DEFAULT_TIMEOUT
    version: int = NTP_DEFAULT_VERSION

    def __post_init__(self) -> None:
        if not isinstance(self.server, str) or not self.server:
            raise ValidationError("server must be a non-empty string")
        if not 0 < self.port <= 0xFFFF:
            raise ValidationError(f"port must be between 1 and 65535, got {self.port}")
        if self.timeout <= 0:
            raise ValidationError(f"timeout must be positive, got {self.timeout}")
        if not 1 <= self.version <= 4:
            raise ValidationError(f"version must be between 1 and 4, got {self.version}")

    @property
    def address(self) -> tuple[str, int]:
        return (self.server, self.port)


class Transport(Protocol):
    """What NtpClient needs from a datagram transport."""

    def send(self, data: bytes, address: tuple[str, int]) -> None: ...

    def recv(self, timeout: float) -> bytes: ...

    def close(self) -> None: ...

    def __enter__(self) -> Transport: ...

    def __exit__(self, *exc_info: object) -> None: ...


class UdpTransport:
    """A UDP socket used for a single request/response exchange.

    The socket is created on the first send, for the address family the
    server name resolves to.
    """

    def __init__(self) -> None:
        self._sock: socket.socket | None = None

    def send(self, data: bytes, address: tuple[str, int]) -> None:
        host, port = address
        family, _, _, _, sockaddr = socket.getaddrinfo(
            host, port, type=socket.SOCK_DGRAM
        )[0]
        if self._sock is None:
            self._sock = socket.socket(family, socket.SOCK_DGRAM)
        self._sock.sendto(data, sockaddr)

    def recv(self, timeout: float) -> bytes:
        """Block for one datagram, at most ``timeout`` seconds.

        Raises:
            TimeoutError: If nothing arrives in time.
            OSError: If nothing was sent first, or on socket errors.
        """
        if self._sock is None:
            raise OSError("recv called before send")
        self._sock.settimeout(timeout)
        data, _ = self._sock.recvfrom(1024)
        return data

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> UdpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class NtpClient:
    """Reads "now" from an NTP server.

    Each call to now() or query() performs exactly one round trip on a
    fresh transport. Failures raise NtpQueryError; retrying (possibly
    against another server) is up to the caller.

    Args:
        config: Server, port, timeout and version. Defaults to NtpConfig().
        transport_factory: Zero-argument callable returning a Transport.
    """

    source = Source.NTP

    def __init__(
        self,
        config: NtpConfig | None = None,
        transport_factory: Callable[[], Transport] = UdpTransport,
    ) -> None:
        self._config = config if config is not None else NtpConfig()
        self._transport_factory = transport_factory

    @property
    def config(self) -> NtpConfig:
        return self._config

    def now(self) -> Instant:
        """Return the server's transmit time as an Instant.

        Raises:
            NtpQueryError: On timeout, network error or malformed response.
        """
        return self.query().transmit.to_instant(self.source)

    def query(self) -> NtpPacket:
        """Perform one request/response exchange and return the response.

        Raises:
            NtpQueryError: On timeout, network error or malformed response.
        """
        config = self._config
        server = f"{config.server}:{config.port}"
        request = NtpPacket.request(config.version)

        logger.debug("querying NTP server %s (timeout %ss)", server, config.timeout)
        try:
            with self._transport_factory() as transport:
                transport.send(request.to_bytes(), config.address)
                data = transport.recv(config.timeout)
        except (socket.timeout, TimeoutError) as exc:
            logger.warning("NTP server %s did not answer within %ss", server, config.timeout)
            raise NtpQueryError(
                f"no response from {server} within {config.timeout}s"
            ) from exc
        except (OSError, UnicodeError, ValueError) as exc:
            # getaddrinfo raises UnicodeError/ValueError for unencodable names
            logger.warning("NTP query to %s failed: %s", server, exc)
            raise NtpQueryError(f"NTP query to {server} failed: {exc}") from exc

        try:
            response = NtpPacket.from_bytes(data)
            _check_response(response, server)
        except NtpQueryError as exc:
            logger.warning("NTP query to %s failed: %s", server, exc)
            raise
        logger.debug(
            "NTP response from %s: stratum %d, transmit %d.%010d",
            server,
            response.stratum,
            response.transmit.seconds,
            response.transmit.fraction,
        )
        return response

    def __repr__(self) -> str:
        return f"NtpClient(config={self._config!r})"


def _check_response(response: NtpPacket, server: str) -> None:
    """Reject responses that cannot carry a usable time.

    Raises:
        NtpQueryError: On wrong mode, bad version, an unsynchronized server,
            kiss-o'-death or a zero transmit timestamp.
    """
    if response.mode != NTP_MODE_SERVER:
        raise NtpQueryError(
            f"NTP response from {server} has mode {response.mode}, expected {NTP_MODE_SERVER}"
        )
    if not 1 <= response.version <= 4:
        raise NtpQueryError(
            f"NTP response from {server} has unsupported version {response.version}"
        )
    if response.leap == NTP_LEAP_UNSYNCHRONIZED:
        raise NtpQueryError(f"NTP server {server} reports its clock is not synchronized")
    if response.stratum == 0:
        code = response.reference_id.decode("ascii", errors="replace").rstrip("\x00")
        raise NtpQueryError(f"NTP server {server} sent kiss-o'-death {code!r}")
    if response.transmit.is_zero:
        raise NtpQueryError(f"NTP response from {server} has a zero transmit timestamp")


__all__ = [
    "NtpTimestamp",
    "NtpPacket",
    "NtpConfig",
    "Transport",
    "UdpTransport",
    "NtpClient",
]
