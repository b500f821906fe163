"""
Runtime settings for the codec, read from the environment.

Values may also be placed in a .env file in the working directory, which is
loaded once on import.

Environment Variables:
    B64_STRICT_DECODE: "true"/"false" - Validate input before decoding (CLI & text helpers)
    B64_CODEC_DEBUG:   "true"/"false" - Emit debug records from the codec
    PRINT_CODEC_LOGS:  "true"/"false" - Echo structured log lines to the console
    B64_LOG_FILE:      Path of the structured event log (default: logs/codec.log)
"""

import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_FILE = os.path.join("logs", "codec.log")


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def strict_decode() -> bool:
    return _flag("B64_STRICT_DECODE")


def codec_debug() -> bool:
    return _flag("B64_CODEC_DEBUG")


def print_logs() -> bool:
    return _flag("PRINT_CODEC_LOGS")


def log_file() -> str:
    return os.getenv("B64_LOG_FILE", DEFAULT_LOG_FILE)
