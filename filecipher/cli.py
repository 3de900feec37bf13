"""
Command-line interface for the filecipher tool.

This module orchestrates the other components and provides
the user-facing actions:
- encrypt
- decrypt
"""

from __future__ import annotations

import sys
import argparse
import traceback
from typing import List, NoReturn, Optional

from .config import (
    DEFAULT_KEY,
    DECRYPTED_SUFFIX,
    ENCRYPTED_SUFFIX,
    TOOL_VERSION,
)
from .transformer import decrypt_file, encrypt_file


# ---------------------------------------------------------------------------
# Color output helpers
# ---------------------------------------------------------------------------


class Colors:
    """ANSI color codes for terminal output."""
    RED = "\033[91m"
    GREEN = "\033[92m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    RESET = "\033[0m"
    BOLD = "\033[1m"


def colored(text: str, color: str) -> str:
    """Return colored text for terminal output."""
    return f"{color}{text}{Colors.RESET}"


def print_error(msg: str) -> None:
    """Print error message to stderr."""
    print(colored(f"✗ {msg}", Colors.RED), file=sys.stderr)


def print_success(msg: str) -> None:
    """Print success message."""
    print(colored(f"✓ {msg}", Colors.GREEN))


# ---------------------------------------------------------------------------
# CLI context
# ---------------------------------------------------------------------------


class CLIContext:
    """Shared context for the encrypt and decrypt actions."""

    def __init__(self, key: str, verbose: bool):
        self.key = key
        self.verbose = verbose

    def log_verbose(self, msg: str) -> None:
        """Log message if verbose."""
        if self.verbose:
            print(colored(f"  → {msg}", Colors.BLUE))


# ---------------------------------------------------------------------------
# Command implementations
# ---------------------------------------------------------------------------


def default_output_path(action: str, input_path: str) -> str:
    """Append the action's suffix to the full input name."""
    suffix = ENCRYPTED_SUFFIX if action == "encrypt" else DECRYPTED_SUFFIX
    return input_path + suffix


def cmd_encrypt(ctx: CLIContext, args: argparse.Namespace) -> int:
    """
    Encrypt the input file into the output file.
    """
    input_path = args.positionals[1]
    output_path = args.output
    if output_path is None:
        output_path = default_output_path("encrypt", input_path)

    try:
        encrypt_file(input_path, ctx.key, output_path, log=ctx.log_verbose)
    except Exception:
        traceback.print_exc()
        print_error(f"Failed to encrypt {input_path}.")
    else:
        print_success(f"Successfully encrypted {input_path}, and saved to {output_path}.")

    return 0


def cmd_decrypt(ctx: CLIContext, args: argparse.Namespace) -> int:
    """
    Decrypt the input file into the output file.
    """
    input_path = args.positionals[1]
    output_path = args.output
    if output_path is None:
        output_path = default_output_path("decrypt", input_path)

    try:
        decrypt_file(input_path, ctx.key, output_path, log=ctx.log_verbose)
    except Exception:
        traceback.print_exc()
        print_error(f"Failed to decrypt {input_path}.")
    else:
        print_success(f"Successfully decrypted {input_path}, and saved to {output_path}.")

    return 0


def usage() -> None:
    """Print usage information."""
    usage_text = f"""
{colored('Usage:', Colors.BOLD)} filecipher encrypt|decrypt <input file> [options]

{colored('Options:', Colors.CYAN)}
  -o, --output <output file>  Defaults to input file name with {ENCRYPTED_SUFFIX} extension
                              if encrypt is used, otherwise defaults to input
                              file name with {DECRYPTED_SUFFIX} extension if decrypt is used.
  -k, --key <encryption key>  Defaults to '{DEFAULT_KEY}' key.
  -v, --verbose               Show each step as it runs.
  -h, --help                  Show this help message and exit.

{colored('Version:', Colors.CYAN)} {TOOL_VERSION}
"""
    print(usage_text.strip())


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class ArgumentParsingError(Exception):
    """Raised instead of letting argparse exit the process."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ArgumentParsingError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = _Parser(
        prog="filecipher",
        description="Encrypt or decrypt a file with a passphrase",
        add_help=False,
    )

    parser.add_argument(
        "positionals",
        nargs="*",
        help="encrypt|decrypt followed by the input file",
    )
    parser.add_argument(
        "-o", "--output",
        help="Path to write the result to",
    )
    parser.add_argument(
        "-k", "--key",
        default=DEFAULT_KEY,
        help="Encryption passphrase",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show help message",
    )

    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()

    try:
        args = parser.parse_intermixed_args(argv)
    except ArgumentParsingError as e:
        print_error(str(e))
        usage()
        return 1

    if args.help:
        usage()
        return 0

    if len(args.positionals) != 2:
        usage()
        return 1

    action = args.positionals[0]

    commands = {
        "encrypt": cmd_encrypt,
        "decrypt": cmd_decrypt,
    }

    cmd_func = commands.get(action)
    if not cmd_func:
        print(f"Unknown action: {action}.")
        usage()
        return 0

    ctx = CLIContext(key=args.key, verbose=args.verbose)

    try:
        return cmd_func(ctx, args)
    except KeyboardInterrupt:
        print_error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
