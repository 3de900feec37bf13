"""
Main entry point for running filecipher as a module.

Usage:
    python -m filecipher encrypt|decrypt <input file> [options]
"""

from .cli import main
import sys

if __name__ == "__main__":
    sys.exit(main())
