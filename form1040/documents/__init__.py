"""Document categories, field vocabularies, and pre-mapping validation.

This module provides:
- DocumentType and FilingStatus vocabularies
- Per-category field vocabularies and extraction-service field translation
- DocumentValidator for presence checks before mapping
"""
