"""
Database connection handling for the restaurant API.

The engine is created once per application (see ``main.lifespan``) and
wrapped in a ``Store``; handlers only ever see the ``Store``.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class ErrorKind(enum.Enum):
    NOT_FOUND = 404
    SERVER_ERROR = 500


@dataclass
class Success:
    rows: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class Failure:
    kind: ErrorKind
    message: str


def create_db_engine(database_url):
    try:
        if database_url.startswith("sqlite"):
            # One shared connection, otherwise each checkout of ":memory:" is a new empty database
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                engine = create_engine(
                    database_url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            else:
                engine = create_engine(database_url, connect_args={"check_same_thread": False})
        else:
            engine = create_engine(database_url, pool_pre_ping=True)
        logger.info(f"Database engine created for {engine.dialect.name}")
        return engine
    except Exception as e:
        logger.error(f"Failed to create database engine: {str(e)}")
        raise


def init_db(engine, base=Base):
    """
    Initialize database tables.
    """
    base.metadata.create_all(engine)
    logger.info("Database tables initialized")


class Store:
    """
    Single-statement gateway to the database.

    ``execute`` checks out a connection, runs one statement in its own
    transaction and gives the connection back before returning. It never
    raises for database errors: they come back as ``Failure``.
    """

    def __init__(self, engine):
        self.engine = engine

    def execute(self, statement):
        try:
            with self.engine.begin() as conn:
                result = conn.execute(statement)
                rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
            return Success(rows)
        except Exception as e:
            # DBAPI errors keep the driver's own text in .orig
            orig = getattr(e, "orig", None)
            return Failure(ErrorKind.SERVER_ERROR, str(orig if orig is not None else e))

    def dispose(self):
        self.engine.dispose()
        logger.info("Database engine disposed")
