from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .db import Base


def utcnow() -> datetime:
    return datetime.utcnow()


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    sort_order = Column(Integer, nullable=False, default=0, index=True)
    name = Column(String(200), nullable=False)
    deadline = Column(String(16), nullable=False)
    module = Column(String(20), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    workload = Column(String(1), nullable=False)
    done_status = Column(String(5), nullable=False, default="false")
    recurrence = Column(String(20), nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    tags = relationship(
        "TaskTagModel",
        cascade="all, delete-orphan",
        order_by="TaskTagModel.tag_name",
        lazy="selectin",
    )


class TaskTagModel(Base):
    __tablename__ = "task_tags"

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_name = Column(String(100), nullable=False)
