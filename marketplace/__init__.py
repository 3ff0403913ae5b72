"""
Course marketplace backend.

Storefront and learning platform API: course publishing, Stripe purchases
and per-chapter progress tracking on top of DynamoDB.
"""

__version__ = "0.1.0"
