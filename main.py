#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--height H] [--width W] [--mines N] [--seed S] [--verbose]
"""
from src.minefield.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
