#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py

Asks for a mine count, then reads commands such as ``3 5 free``,
``3 5 mine``, ``reveal`` or ``exit`` until the game ends.
"""
from src.minesweeper.console import main


if __name__ == "__main__":
    main()
