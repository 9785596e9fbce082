from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class CompilationLog(Base):
    __tablename__ = "compilation_logs"

    id = Column(Integer, primary_key=True)
    provider = Column(String(16), nullable=False)
    region = Column(String(64), nullable=False)
    node_count = Column(Integer, default=0)
    edge_count = Column(Integer, default=0)
    payload = Column(Text)
    valid = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
