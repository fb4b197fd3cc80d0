"""Seed datasets, one module per dataset (categories, users, reviews, comments)."""
