from blocklist.db.models.blocked_domain import BlockedDomain

__all__ = ["BlockedDomain"]
