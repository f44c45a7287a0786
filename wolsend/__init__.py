"""Send a single Wake-on-LAN magic packet."""

__version__ = "0.1.0"
