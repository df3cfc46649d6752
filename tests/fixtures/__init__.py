"""
Test fixtures for the C-CDA Validation Service.

Contains sample data for testing:
- sample_ccda.xml: Minimal Continuity of Care Document (synthetic patient)
"""
