"""Integration tests for the FastAPI app served through ASGITransport.

The engine and content services are injected with fakes via
dependency overrides.
"""
