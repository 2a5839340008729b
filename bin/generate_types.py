#!/usr/bin/env python3
"""
Ruby SDK Types Generator

Reads a JSON model description and generates the Ruby file that declares
the classes and enums of the SDK.

Usage:
    python generate_types.py model.json --output-dir lib/
    python generate_types.py model.json -o lib/ --module OvirtSDK4 --require ovirtsdk4/type
"""

import sys
from pathlib import Path

# Add parent directory to path so rbtypegen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from rbtypegen.cli import main


if __name__ == "__main__":
    sys.exit(main())
