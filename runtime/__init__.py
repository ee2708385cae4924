"""
Runtime package for Desk Toolkit.

This package contains:
- Stores (the append-only outcome log)
- Models (Pydantic models for outcome records and task status)
"""
