"""
Command line front-end for the codec.

Usage:
    python -m b64codec encode <text>
    python -m b64codec encode --file <path>
    python -m b64codec decode <base64> [--out <path>] [--strict]

Decoded bytes are written raw to stdout unless --out is given.

Exit codes:
    0 - Success
    1 - Bad arguments / unreadable input or unwritable output file
    2 - Strict decoding rejected the input
"""

import sys

from b64codec import codec, config, errors
from b64codec.utils.logger import Logger, Level, Event

USAGE = (
    "Correct args usage: python -m b64codec encode <text> | encode --file <path> | "
    "decode <base64> [--out <path>] [--strict]"
)


def _option(args, name):
    """Pop `name <value>` from args, returning the value or None."""
    if name not in args:
        return None
    index = args.index(name)
    if index + 1 >= len(args):
        raise ValueError(f"{name} needs a value")
    value = args[index + 1]
    del args[index:index + 2]
    return value


def run_encode(args, logger: Logger) -> int:
    path = _option(args, "--file")
    if path is not None:
        if args:
            raise ValueError("encode --file takes no other values")
        try:
            with open(path, "rb") as input_file:
                data = input_file.read()
        except OSError as e:
            logger.log_event(Level.LEVEL_ERROR, Event.FILE_READ_FAILED, message=str(path))
            print(f"Could not read {path}: {e.strerror}")
            return 1
    elif len(args) == 1:
        data = args[0].encode('utf-8')
    else:
        raise ValueError("encode takes one value or --file <path>")

    encoded = codec.encode(data)
    logger.log_event(Level.LEVEL_INFO, Event.ENCODE, len(data), encoded)
    print(encoded)
    return 0


def run_decode(args, logger: Logger) -> int:
    strict = config.strict_decode()
    if "--strict" in args:
        args.remove("--strict")
        strict = True
    out_path = _option(args, "--out")
    if len(args) != 1:
        raise ValueError("decode takes exactly one value")

    try:
        data = codec.decode(args[0], validate=strict)
    except errors.InvalidInputError as e:
        logger.log_event(Level.LEVEL_ERROR, Event.DECODE_FAILED, len(args[0]), e.message)
        print(e.message)
        return 2

    if out_path is not None:
        try:
            with open(out_path, "wb") as output_file:
                output_file.write(data)
        except OSError as e:
            logger.log_event(Level.LEVEL_ERROR, Event.FILE_WRITE_FAILED, len(data), str(out_path))
            print(f"Could not write {out_path}: {e.strerror}")
            return 1
    else:
        sys.stdout.flush()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()

    logger.log_event(Level.LEVEL_INFO, Event.DECODE, len(args[0]), args[0])
    return 0


COMMANDS = {
    "encode": run_encode,
    "decode": run_decode,
}


def main(argv=None) -> int:
    """
    Run the command line front-end.

    Args:
        argv: Argument list without the program name (default: sys.argv[1:])

    Returns:
        int: Process exit code
    """
    args = list(sys.argv[1:] if argv is None else argv)
    logger = Logger()
    logger.configure_logger()

    try:
        if not args or args[0] not in COMMANDS:
            raise ValueError("unknown command")
        return COMMANDS[args[0]](args[1:], logger)
    except ValueError as e:
        logger.log_event(Level.LEVEL_WARNING, Event.USAGE_ERROR, message=str(e))
        print(USAGE)
        return 1
    finally:
        logger.close()
