"""Boundary adapters: DynamoDB, S3, Stripe and Clerk."""
