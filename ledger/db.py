from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from ledger.core.settings import settings
from ledger.models import Base


def _connect_args(url: str) -> dict:
    # SQLite connections are handed across FastAPI's worker threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# pool_pre_ping/pool_recycle guard against dropped/stale connections causing OperationalError
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    connect_args=_connect_args(settings.DATABASE_URL),
    pool_pre_ping=True,
    pool_recycle=300,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Alembic owns the schema in deployed environments
def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
