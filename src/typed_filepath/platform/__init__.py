"""Platform integrations.

Where: platform/__init__.py
What: Group host-facing integrations; logging lives in ``platform.logging``.
Why: Keep side-effecting setup apart from the pure value type.
"""
