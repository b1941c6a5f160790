"""Configuration exports.

Where: config/__init__.py
What: Re-export default path algebra selection.
Why: Callers import configuration from the package, not its modules.
"""

from .settings import ENV_ALGEBRA, AlgebraName, default_path_algebra, resolve_algebra_name

__all__ = [
    "ENV_ALGEBRA",
    "AlgebraName",
    "default_path_algebra",
    "resolve_algebra_name",
]
