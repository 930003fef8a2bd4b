"""Form 1040 record, field mapping, and tax calculation.

This module provides:
- Form1040Data, the sparse 1040 record, and FormLine
- merge_document for folding one document into the record
- Calculator functions for the derived lines
- create_mapping_summary for the field-to-line audit trail
"""
