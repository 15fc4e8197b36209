import os
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from shortener.config import Settings

Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    # Сессия закрывается сразу после операции, объекты должны оставаться читаемыми.
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
    )


def init_db(engine: Engine) -> None:
    """Создает каталог для файла SQLite и таблицы, если их нет."""
    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        data_dir = os.path.dirname(url.database)
        if data_dir and not os.path.exists(data_dir):
            os.makedirs(data_dir)

    # Регистрирует модели в метаданных.
    from shortener import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
