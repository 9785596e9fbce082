from infracanvas.db.models import Base, CompilationLog
from infracanvas.db.session import SessionLocal, engine, get_db

__all__ = ["Base", "CompilationLog", "SessionLocal", "engine", "get_db"]
