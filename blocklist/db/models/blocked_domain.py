from sqlalchemy import Column, Table, Text

from blocklist.db.base import Base

blocked_domains = Table(
    "blocked_domains",
    Base.metadata,
    Column("domain_name", Text, nullable=False, unique=True),
)


class BlockedDomain(Base):
    __table__ = blocked_domains

    # No primary key constraint on the table; the unique name identifies a row.
    __mapper_args__ = {"primary_key": [blocked_domains.c.domain_name]}
