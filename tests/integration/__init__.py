"""
Integration tests for the C-CDA Validation Service.

Test components together, with fake validator adapters:
- Full pipeline (stream -> structural -> vocabulary -> content -> envelope)
- API endpoints (FastAPI TestClient, multipart uploads)
"""
