# optyshop_admin/db.py
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()

def _resolve_db_url():
    # Try common env names
    url = (os.getenv("DATABASE_URL")
           or os.getenv("DEMO_STORE_URL")
           or os.getenv("DB_URL"))
    if not url:
        data_dir = os.getenv("DATA_DIR", "data")
        url = f"sqlite:///{os.path.join(data_dir, 'demo_store.db')}"
    return url

def _ensure_sqlite_parent(url: str):
    if url.startswith("sqlite:///"):
        db_path = url[len("sqlite:///"):]
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

def make_engine(url: str = None):
    url = url or _resolve_db_url()
    return create_engine(
        url,
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {}
    )

DATABASE_URL = _resolve_db_url()
engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind=None):
    bind = bind or engine
    _ensure_sqlite_parent(str(bind.url))
    Base.metadata.create_all(bind=bind)
