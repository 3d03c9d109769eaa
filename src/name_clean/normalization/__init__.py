"""
name_clean.normalization package

Contains the field cleaners applied to registrant records:

- text:  whitespace/email/licence/name cleaning, smart punctuation folding
- phone: E.164 formatting

This __init__ intentionally exports NOTHING to avoid circular imports.
"""

__all__ = []
