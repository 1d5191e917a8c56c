"""Read-only containers."""

from tagattrs.data.locked import LockedMapping

__all__ = ["LockedMapping"]
