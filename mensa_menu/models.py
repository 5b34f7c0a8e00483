from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CacheEntry(Base):
    """One cached translation or explanation.

    kind is "translations" or "explanations". For translations, subject is the
    original dish/section name and partition_date the menu date; for
    explanations, subject is the dish name and partition_date the day the
    explanation was generated.
    """
    __tablename__ = "cache_entries"

    id = Column(Integer, primary_key=True, index=True)
    kind = Column(String(20), nullable=False)
    partition_date = Column(String(10), nullable=False)  # YYYY-MM-DD
    language = Column(String(5), nullable=False)
    subject = Column(String(500), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("kind", "partition_date", "language", "subject", name="uq_cache_entries_key"),
        # Sweeper deletes by (kind, partition_date); explanation lookups ignore the date
        Index("ix_cache_entries_kind_partition", "kind", "partition_date"),
        Index("ix_cache_entries_kind_subject", "kind", "subject", "language"),
    )
