"""
Storage abstractions for the Desk Toolkit runtime.

Includes:
- LogStore: append-only text log gated on file extension + existence
"""
