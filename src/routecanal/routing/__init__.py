"""Routing — regex route table sorted once, matched in order.

Routes are registered during setup and frozen into an immutable,
pre-sorted tuple when the router seals.
"""
