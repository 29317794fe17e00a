#!/usr/bin/env python3
import os
import sys

# Run the CLI straight from a source checkout
ROOT = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.join(ROOT, "src")
sys.path.insert(0, SRC)

from gedcom_validator.cli.app import main

if __name__ == "__main__":
    main()
