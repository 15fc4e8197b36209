"""Хранилище соответствий коротких идентификаторов и длинных ссылок."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from shortener.config import Settings
from shortener.database import create_db_engine, create_session_factory
from shortener.errors import StoreUnavailable
from shortener.models import UrlMapping

logger = logging.getLogger(__name__)


class UrlStore:
    """Вставка и поиск записей в таблице `urls`.

    Каждая операция открывает собственную сессию. Ошибки базы данных
    не повторяются и пробрасываются как `StoreUnavailable`.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @classmethod
    def from_settings(cls, settings: Settings) -> "UrlStore":
        engine = create_db_engine(settings)
        return cls(create_session_factory(engine))

    def insert(self, mapping: UrlMapping) -> None:
        """Сохраняет запись без проверки уникальности идентификатора."""
        with self._session_factory() as session:
            try:
                session.add(mapping)
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error("Failed to insert %s: %s", mapping.short_id, exc)
                raise StoreUnavailable("Не удалось сохранить ссылку.") from exc

    def find_by_short_id(self, short_id: str) -> Optional[UrlMapping]:
        """Находит запись по короткому идентификатору.

        При совпадающих идентификаторах возвращается самая ранняя запись.
        """
        with self._session_factory() as session:
            try:
                return (
                    session.query(UrlMapping)
                    .filter(UrlMapping.short_id == short_id)
                    .order_by(UrlMapping.id)
                    .first()
                )
            except SQLAlchemyError as exc:
                logger.error("Failed to look up %s: %s", short_id, exc)
                raise StoreUnavailable("Не удалось прочитать ссылку.") from exc
