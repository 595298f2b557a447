"""CLI commands for ledgrid."""

from .config import config
from .decode import decode_cmd
from .encode import encode_cmd

__all__ = ["config", "decode_cmd", "encode_cmd"]
