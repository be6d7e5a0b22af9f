"""Database package: engine, session factory, base."""

from bodytrack.db.session import dispose_engine, get_engine, get_session_maker

__all__ = ["dispose_engine", "get_engine", "get_session_maker"]
