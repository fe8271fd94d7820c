from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from app.config.environments import DATABASE_URL

# psycopg2 / plain postgres URLs are served through asyncpg
ASYNC_DB_URL = (
    DATABASE_URL
    .replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    .replace("postgresql://", "postgresql+asyncpg://")
)

connect_args = {}
if ASYNC_DB_URL.startswith("postgresql+asyncpg"):
    # pgbouncer in transaction mode does not support prepared statements
    connect_args = {
        "statement_cache_size": 0,
        "prepared_statement_cache_size": 0,
    }

engine = create_async_engine(
    ASYNC_DB_URL,
    poolclass=NullPool,
    connect_args=connect_args
)

AsyncSessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()
