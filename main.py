"""Entry point for the Wake-on-LAN sender.
Run: python main.py --mac aa:bb:cc:dd:ee:ff
"""
import sys

from wolsend.cli import main

if __name__ == "__main__":
    sys.exit(main())
