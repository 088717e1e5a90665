"""Database connection factories."""

from typing import Callable

import oracledb
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool

# Takes a connection descriptor, returns an engine that has not connected yet
ConnectionFactory = Callable[[str], Engine]


def oracle_connection_factory(descriptor: str) -> Engine:
    """
    Create an engine for an Oracle ``username/password@service`` descriptor.

    The engine does not pool, so closing its single connection releases the
    server session.
    """
    return create_engine(
        "oracle+oracledb://",
        creator=lambda: oracledb.connect(dsn=descriptor),
        poolclass=NullPool,
    )
