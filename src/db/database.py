"""Generate database sessions"""

from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base


def make_session_factory(database_url: str, echo: bool = False) -> sessionmaker[Session]:
    """Connect to the database and make sure all tables exist."""
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # One shared connection, or every session would see its own empty database
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=echo)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False)
