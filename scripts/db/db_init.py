import argparse
import asyncio
import os
import sys

# Add the project root to the Python path
sys.path.append(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from src.database.base import Base
from src.database.connection import engine

# Import models so they are registered with Base.metadata
from src.database.models import Product, ProductInteraction

_ = (Product, ProductInteraction)


async def init_db(drop_tables: bool = False):
    async with engine.begin() as conn:
        if drop_tables:
            print("Dropping all tables...")
            await conn.run_sync(Base.metadata.drop_all)
            print("Tables dropped.")
        print("Creating tables...")
        await conn.run_sync(Base.metadata.create_all)
        print("Tables created.")


async def main(drop_tables: bool = False):
    try:
        await init_db(drop_tables=drop_tables)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Initialize the database schema.")
    parser.add_argument(
        "--drop", action="store_true", help="Drop existing tables before creating them"
    )
    args = parser.parse_args()
    asyncio.run(main(drop_tables=args.drop))
