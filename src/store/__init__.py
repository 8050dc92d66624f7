"""Licence collection layer.

This module holds the in-memory collection, its row predicates,
product code checks, and the SDK client built on top of them.
"""
