"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Road network storage (CSV files)
- Route caching (in-memory, null)
"""
