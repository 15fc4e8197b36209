from sqlalchemy import Column, Integer, String
from shortener.database import Base


class UrlMapping(Base):
    __tablename__ = "urls"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Индекс не уникальный: совпадения идентификаторов не проверяются.
    short_id = Column(String(6), index=True, nullable=False)
    long_url = Column(String, nullable=False)

    def __repr__(self):
        return f"UrlMapping(short_id={self.short_id!r}, long_url={self.long_url!r})"
