from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from translatable_field.config import get_settings


class Base(DeclarativeBase):
    pass


def create_db_engine(database_url: str, **kwargs) -> Engine:
    connect_args = kwargs.pop("connect_args", {})
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args.setdefault("check_same_thread", False)

    db_engine = create_engine(database_url, connect_args=connect_args, **kwargs)

    if is_sqlite:
        # pysqlite emits BEGIN lazily, which breaks SAVEPOINT; begin explicitly instead
        @event.listens_for(db_engine, "connect")
        def _disable_pysqlite_begin(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(db_engine, "begin")
        def _emit_begin(conn):
            conn.exec_driver_sql("BEGIN")

    return db_engine


settings = get_settings()

engine = create_db_engine(settings.database_url, echo=settings.debug)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
