from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar

from . import __version__
from .mac import MacAddress, MacFormatError, parse_mac
from .wol import Destination

DEFAULT_BROADCAST = "255.255.255.255"
DEFAULT_PORT = 9

T = TypeVar("T")


@dataclass(frozen=True)
class Settings:
    mac: MacAddress
    destination: Destination
    verbose: bool = False


class ConfigError(Exception):
    pass


def _validate_mac(mac: str) -> MacAddress:
    try:
        return parse_mac(mac)
    except MacFormatError as e:
        raise ConfigError("Invalid MAC address format") from e


def _validate_address(address: str) -> str:
    if not address:
        raise ConfigError("Address must not be empty")
    if "\x00" in address:
        raise ConfigError(f"Address must not contain a null character: {address!r}")
    return address


def _validate_port(port: str) -> int:
    if not (port.isascii() and port.isdigit()):
        raise ConfigError(f"Port must be an integer: {port!r}")
    value = int(port)
    if not 0 <= value <= 0xFFFF:
        raise ConfigError(f"Port must be between 0 and 65535: {value}")
    return value


def _arg(validator: Callable[[str], T]) -> Callable[[str], T]:
    # argparse only shows our message for ArgumentTypeError
    def convert(raw: str) -> T:
        try:
            return validator(raw)
        except ConfigError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wolsend",
        description="Send a Wake-on-LAN magic packet to wake a device by its MAC address.",
    )
    parser.add_argument("-m", "--mac", required=True, type=_arg(_validate_mac),
                        help="MAC address of the device to wake, e.g. aa:bb:cc:dd:ee:ff")
    parser.add_argument("-a", "--address", default=DEFAULT_BROADCAST, type=_arg(_validate_address),
                        help="broadcast address or host to send the packet to (default: %(default)s)")
    parser.add_argument("-p", "--port", default=DEFAULT_PORT, type=_arg(_validate_port),
                        help="UDP port to send the packet to (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Parse command line arguments into Settings.

    Invalid input ends in an argparse usage error (SystemExit with code 2)
    before any network action happens.
    """
    args = build_parser().parse_args(argv)
    return Settings(
        mac=args.mac,
        destination=Destination(host=args.address, port=args.port),
        verbose=args.verbose,
    )
