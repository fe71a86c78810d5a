"""Shared HTTP components: response models and middleware."""
