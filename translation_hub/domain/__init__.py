"""Domain layer for Translation Hub.

Entities, exceptions, the storage interface and the services built on it.
"""
