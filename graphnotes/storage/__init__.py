"""Vault metadata storage."""

from .vault import VaultConfig, init_vault, is_vault, load_vault_config

__all__ = [
    "VaultConfig",
    "init_vault",
    "is_vault",
    "load_vault_config",
]
