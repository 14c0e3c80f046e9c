from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def normalize_database_url(url: str) -> str:
    """Normalize PostgreSQL URL to use psycopg3 driver."""
    if url.startswith("postgresql://") and "+psycopg" not in url:
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the given URL.

    SQLite connections are shared with FastAPI's worker threads, and the
    pysqlite driver's own transaction handling is switched off so that
    SQLAlchemy emits BEGIN itself. Without that, releasing the first
    SAVEPOINT of a transaction would commit it.
    """
    database_url = normalize_database_url(database_url)

    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    engine = create_engine(database_url, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine
