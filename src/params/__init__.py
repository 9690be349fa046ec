"""
Accessors for the single scalar configuration parameter.

Backends
- HttpParameterStore: generic HTTP backend (`/config`).
- SsmParameterStore: SSM Parameter Store SecureString.
"""

from .base import ParameterAccessor

__all__ = ["ParameterAccessor"]
