from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Union

from .mac import MacAddress, parse_mac

logger = logging.getLogger("wolsend")

PACKET_SIZE = 102
BIND_ADDRESS = ("0.0.0.0", 0)


@dataclass(frozen=True)
class Destination:
    host: str = "255.255.255.255"
    port: int = 9

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class SendError(Exception):
    stage = "send"

    def __init__(self, message: str, destination: Destination, cause: OSError):
        super().__init__(f"{message}: {cause}")
        self.destination = destination
        self.cause = cause


class BindError(SendError):
    stage = "bind"


class BroadcastError(SendError):
    stage = "broadcast"


class TransmitError(SendError):
    stage = "send"


def build_magic_packet(mac: Union[MacAddress, str]) -> bytes:
    if not isinstance(mac, MacAddress):
        mac = parse_mac(mac)
    return b"\xff" * 6 + mac.octets * 16


def send_magic_packet(packet: bytes, destination: Destination) -> None:
    """Send ``packet`` once as a UDP broadcast datagram.

    Binds to an ephemeral local port, enables SO_BROADCAST and does a single
    sendto. Nothing is awaited afterwards. Each stage raises its own
    SendError subclass chained to the OSError.
    """
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as e:
        raise BindError("failed to bind socket", destination, e) from e
    with s:
        try:
            s.bind(BIND_ADDRESS)
        except OSError as e:
            raise BindError("failed to bind socket", destination, e) from e
        try:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as e:
            raise BroadcastError("failed to enable broadcast", destination, e) from e
        try:
            s.sendto(packet, (destination.host, destination.port))
        except OSError as e:
            raise TransmitError(f"failed to send packet to {destination}", destination, e) from e


def wake(mac: MacAddress, destination: Destination) -> bytes:
    packet = build_magic_packet(mac)
    logger.debug("Built %d byte magic packet for %s", len(packet), mac)
    send_magic_packet(packet, destination)
    logger.info("Sent WoL to %s via %s", mac, destination)
    return packet
