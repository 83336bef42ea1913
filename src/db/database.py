"""Generate database session"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import EditorConfig
from src.db.schema import Base


def create_db_engine(config: EditorConfig) -> Engine:
    engine = create_engine(config.database_url, echo=config.echo_sql)
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return engine


def create_session(config: EditorConfig) -> Session:
    SessionLocal = sessionmaker(bind=create_db_engine(config))
    return SessionLocal()
