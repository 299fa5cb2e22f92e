"""
Test suite for the name shortener.

Focus areas:
- Digest stability
- Length bounds of composed and limited names
- Determinism
- CLI and logging configuration
"""
