import logging
from typing import Optional

from fastapi import FastAPI, Depends, HTTPException, Request, Body, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from shortener.config import Settings, load_settings
from shortener.database import create_db_engine, create_session_factory, init_db
from shortener.errors import MappingNotFound, StoreUnavailable
from shortener.schemas import UrlMappingOut
from shortener.service import create_mapping, resolve
from shortener.store import UrlStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> UrlStore:
    return request.app.state.store


def create_app(settings: Optional[Settings] = None, store: Optional[UrlStore] = None) -> FastAPI:
    """Собирает приложение. Хранилище создается из настроек, если не передано."""
    settings = settings or load_settings()

    if store is None:
        engine = create_db_engine(settings)
        init_db(engine)
        store = UrlStore(create_session_factory(engine))

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    @app.post("/shorten", response_model=UrlMappingOut)
    def create_short_url(
        long_url: str = Body("", media_type="text/plain"),
        store: UrlStore = Depends(get_store),
    ):
        """
        Создает короткую ссылку для переданного URL.
        Тело запроса - исходный URL.
        """
        try:
            return create_mapping(store, long_url)
        except StoreUnavailable:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Хранилище недоступно."
            )

    @app.get("/{short_id}", response_class=RedirectResponse)
    def redirect_url(short_id: str, store: UrlStore = Depends(get_store)):
        """
        Перенаправляет пользователя на исходный URL.
        """
        try:
            mapping = resolve(store, short_id)
        except MappingNotFound:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ссылка не найдена.")
        except StoreUnavailable:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Хранилище недоступно."
            )

        return RedirectResponse(url=mapping.long_url, status_code=status.HTTP_303_SEE_OTHER)

    logger.debug("Application created for %s", settings.database_url)
    return app
