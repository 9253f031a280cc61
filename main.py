"""Command-line entry point for zilkit."""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from zilkit.config import LogConfig, get_settings
from zilkit.crypto import (
    generate_private_key,
    get_address_from_public_key,
    get_public_key_from_private_key,
    is_valid_checksum_address,
    to_checksum_address,
)
from zilkit.exceptions import CryptoError, TransportError
from zilkit.providers import HTTPProvider


def setup_logging(config: LogConfig) -> None:
    """Configure loguru logging."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=config.level.upper(),
    )
    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.file,
            rotation="100 MB",
            retention="7 days",
            level="DEBUG",
        )


def cmd_generate(args: argparse.Namespace) -> None:
    """Print a new private key with its public key and address."""
    private_key = generate_private_key()
    public_key = get_public_key_from_private_key(private_key)
    print(f"private_key: {private_key}")
    print(f"public_key:  {public_key}")
    print(f"address:     {get_address_from_public_key(public_key)}")


def cmd_derive(args: argparse.Namespace) -> None:
    """Print the public key and address of a private key."""
    public_key = get_public_key_from_private_key(args.private_key)
    print(f"public_key: {public_key}")
    print(f"address:    {get_address_from_public_key(public_key)}")


def cmd_checksum(args: argparse.Namespace) -> None:
    """Print the checksummed form of an address."""
    print(to_checksum_address(args.address))


def cmd_validate(args: argparse.Namespace) -> int:
    """Report whether an address is correctly checksummed."""
    valid = is_valid_checksum_address(args.address)
    print("valid" if valid else "invalid")
    return 0 if valid else 1


async def cmd_balance(args: argparse.Namespace) -> None:
    """Print balance and nonce of an address."""
    async with HTTPProvider(url=args.rpc_url) as provider:
        response = await provider.get_balance(args.address)
    print(f"balance: {response.balance}")
    print(f"nonce:   {response.nonce}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="zilkit - account derivation and checksummed addresses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("generate", help="Generate a new private key")

    derive = sub.add_parser("derive", help="Derive public key and address from a private key")
    derive.add_argument("private_key")

    checksum = sub.add_parser("checksum", help="Checksum-encode an address")
    checksum.add_argument("address")

    validate = sub.add_parser("validate", help="Check an address's checksum casing")
    validate.add_argument("address")

    balance = sub.add_parser("balance", help="Fetch balance and nonce from the node")
    balance.add_argument("address")
    balance.add_argument(
        "--rpc-url",
        default=None,
        help="Node RPC endpoint (default: ZILLIQA_RPC_URL or http://127.0.0.1:5555)",
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = parse_args(argv)
    setup_logging(get_settings().log)

    try:
        if args.command == "generate":
            cmd_generate(args)
        elif args.command == "derive":
            cmd_derive(args)
        elif args.command == "checksum":
            cmd_checksum(args)
        elif args.command == "validate":
            return cmd_validate(args)
        elif args.command == "balance":
            asyncio.run(cmd_balance(args))
    except (CryptoError, TransportError) as e:
        logger.error("{}: {}", type(e).__name__, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
