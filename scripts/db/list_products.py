#!/usr/bin/env python3
"""
Dump the product catalog as JSON.

Output is wrapped in PRODUCTS_START / PRODUCTS_END marker lines so other
tooling can cut the JSON out of the log noise.

Usage:
    python scripts/db/list_products.py
"""

import asyncio
import json
import os
import sys

# Add the project root to the Python path
sys.path.append(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from sqlalchemy.future import select

from src.database.connection import AsyncSessionLocal, engine
from src.database.models.product import Product

LISTED_FIELDS = ("id", "name", "category", "image", "description")


def serialize_products(products) -> list:
    return [{field: getattr(p, field) for field in LISTED_FIELDS} for p in products]


async def list_products() -> list:
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Product).order_by(Product.id))
        return serialize_products(result.scalars().all())


async def main() -> int:
    try:
        products = await list_products()
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    finally:
        await engine.dispose()

    print("PRODUCTS_START")
    print(json.dumps(products, indent=2))
    print("PRODUCTS_END")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
