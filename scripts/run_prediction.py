#!/usr/bin/env python3
"""
Standalone prediction script.
Loads the draw workbook, asks for an analysis method and prints the report.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from powerlotto.cli import main


if __name__ == "__main__":
    sys.exit(main())
