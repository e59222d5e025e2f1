#!/usr/bin/env python3
"""
pathcodec - Main Entry

Usage:
    python main.py encode a b "c;d"          # Encode a string list
    python main.py decode "a;b;c\\;d"        # Decode it again
    python main.py split-name archive.tar.gz # Filename parts
    python main.py --help                    # All subcommands
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    from pathcodec_cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
