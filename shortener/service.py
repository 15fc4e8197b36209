import logging

from shortener.errors import MappingNotFound
from shortener.generator import generate_short_id
from shortener.models import UrlMapping
from shortener.store import UrlStore

logger = logging.getLogger(__name__)


def create_mapping(store: UrlStore, long_url: str) -> UrlMapping:
    """Создает короткую ссылку для переданного URL.

    URL сохраняется как есть, без нормализации и проверки схемы.
    """
    mapping = UrlMapping(short_id=generate_short_id(), long_url=long_url)
    store.insert(mapping)
    logger.info("Created short URL: %s -> %s", mapping.short_id, long_url)
    return mapping


def resolve(store: UrlStore, short_id: str) -> UrlMapping:
    """Возвращает запись по короткому идентификатору."""
    mapping = store.find_by_short_id(short_id)
    if mapping is None:
        logger.warning("Short id not found: %s", short_id)
        raise MappingNotFound(short_id)
    logger.debug("Resolved %s -> %s", short_id, mapping.long_url)
    return mapping
