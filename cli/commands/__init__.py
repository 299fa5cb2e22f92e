"""
Command implementations for the namer CLI.
"""
