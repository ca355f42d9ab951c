"""
Input tree and response parsing module.

Models for the requirement group tree of an imported criterion, the typed
value union, and the parsers that turn raw responses into typed values.
"""
