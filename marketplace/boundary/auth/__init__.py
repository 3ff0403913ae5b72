"""
Identity provider boundary.

Exports: ClerkTokenVerifier
"""

from .clerk_verifier import ClerkTokenVerifier

__all__ = ["ClerkTokenVerifier"]
