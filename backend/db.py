from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import DATABASE_URL, SQL_ECHO


def make_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> Engine:
    engine = create_engine(url, echo=echo)
    if engine.dialect.name == "sqlite":
        # sqlite ignores FOREIGN KEY clauses unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return engine


#process-wide engine, built on first use so importing models never needs a driver
@lru_cache(maxsize=None)
def get_engine() -> Engine:
    return make_engine()


#create a configured " Session" class will be used to interact with database
SessionLocal = sessionmaker(autocommit=False, autoflush=False)
#autoflush disables autoflushing of changes to the db before queries are executed.

#Base class for our models
Base = declarative_base()


#dependency to get db session
def get_db(engine: Engine = None):
    db = SessionLocal(bind=engine or get_engine())
    try:
        yield db
    finally:
        db.close()
