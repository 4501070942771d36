"""Test package for NexChat.

Structure:
    - unit/: Engine, reveal, clients and parsing in isolation
    - integration/: HTTP API against an in-process app

The model and remote services are always faked; no test needs an API key.
"""
