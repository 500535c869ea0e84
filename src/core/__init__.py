"""
Core domain models, record contracts and logging.

This module contains the foundational building blocks that are independent
of external systems (flows, RPC, notary, vault).
"""
