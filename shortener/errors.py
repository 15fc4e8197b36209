class StoreError(Exception):
    """Базовая ошибка хранилища ссылок."""


class StoreUnavailable(StoreError):
    """Хранилище недоступно или операция завершилась ошибкой."""


class MappingNotFound(LookupError):
    """Ссылка с таким идентификатором не найдена."""

    def __init__(self, short_id: str):
        super().__init__(short_id)
        self.short_id = short_id
