"""
Unit tests for the C-CDA Validation Service.

Test individual components in isolation:
- Data models (severity parsing, objectives, finding and metadata serialization)
- Document reader (BOM handling, strict decoding, stream release)
- Error normalizer (classification precedence, message construction)
- Stage runner and result aggregation
- Adapter loading and dependency wiring
"""
