"""Сервис для сокращения ссылок."""

__version__ = "1.0.0"
