"""
CLIMA package
=============

This package contains CLIMA, a small climate analyzer for monthly country
temperatures.

- The CLI entry point is in `clima/cli.py`.
- The query engine (filters, sorting, dedup, grouping) is in `clima/engine.py`.
- The named analyses (A1-A4, B1-B3, C1) are in `clima/analyzer.py`.
- Dataset loading is in `clima/loader.py`.
"""

__version__ = '0.3.0'
