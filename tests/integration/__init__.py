"""Integration tests for the HTTP API and real provider calls.

Tests that hit real providers are marked with @pytest.mark.integration and
skip themselves when no API key is configured.

Run integration tests:
    pytest tests/integration/ -v -s -m integration

Skip integration tests during regular testing:
    pytest tests/ --ignore=tests/integration/
"""
