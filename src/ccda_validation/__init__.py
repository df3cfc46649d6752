"""
C-CDA Reference Validation Service.

Validates C-CDA clinical documents against a requested validation objective
and returns a structured report:
- Structural (schema/template) conformance findings
- Vocabulary (code system / value set) findings
- Reference content findings

Architecture: FastAPI surface + pluggable validator adapters + staged
validation pipeline with uniform error normalization
"""

__version__ = "0.1.0"
