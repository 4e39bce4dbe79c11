#!/usr/bin/env python3
"""
Minesweeper - main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed S]
    python main.py play --rows R --cols C --mines M
    python main.py show [--seed S]
"""
import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper.cli import main


if __name__ == "__main__":
    main()
