#!/usr/bin/env python3
"""
Wait for Postgres, run migrations, seed demo room types and addons, then exec uvicorn.
"""
import os
import sys

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from hotel_api.core.config import settings

# 1) Wait for DB (sqlite needs no waiting)
if settings.DATABASE_URL.startswith("postgresql"):
    import wait_for_db  # noqa: F401

# 2) Migrations, with the same URL the app uses
alembic_cfg = Config(os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini"))
alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
command.upgrade(alembic_cfg, "head")

# 3) Seed on an engine created after migrations
from hotel_api.seed import run as run_seed

seed_engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)
SeedSession = sessionmaker(autocommit=False, autoflush=False, bind=seed_engine)
run_seed(SeedSession())
seed_engine.dispose()

# 4) Replace this process with uvicorn
port = os.getenv("PORT", "8000")
os.execv(
    sys.executable,
    [sys.executable, "-m", "uvicorn", "hotel_api.main:app", "--host", "0.0.0.0", "--port", port],
)
