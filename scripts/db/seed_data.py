"""
Seed a demo catalog and interaction log for the insights dashboard.

Usage:
    python scripts/db/seed_data.py [--events 2000] [--seed 7]
"""
import argparse
import asyncio
import os
import random
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal

# Add project root to python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from sqlalchemy import func
from sqlalchemy.future import select

from src.config.constants import InteractionType
from src.database.connection import AsyncSessionLocal, engine
from src.database.models import Product, ProductInteraction

DEMO_PRODUCTS = [
    ("Cloud Memory Foam Mattress", "mattress", "499.00", 34),
    ("Hybrid Spring Mattress", "mattress", "649.00", 22),
    ("Latex Support Pillow", "pillow", "59.00", 8),
    ("Cooling Gel Topper", "topper", "129.00", 15),
    ("Solid Oak Bed Frame", "furniture", "899.00", 3),
    ("Bamboo Sheet Set", "bedding", "79.00", 41),
]

# Relative frequency of each interaction type in generated traffic
EVENT_WEIGHTS = {
    InteractionType.VIEW: 70,
    InteractionType.CLICK: 15,
    InteractionType.CART_ADD: 10,
    InteractionType.PURCHASE: 5,
}


async def seed_data(event_count: int, seed: int):
    """Insert demo products when the catalog is empty, then append random interactions."""
    print("Starting database seeding...")
    rng = random.Random(seed)

    async with AsyncSessionLocal() as session:
        existing = await session.scalar(select(func.count()).select_from(Product))
        if existing:
            print(f"Catalog already has {existing} products, skipping product seed.")
        else:
            print("Seeding products...")
            session.add_all(
                [
                    Product(
                        name=name,
                        category=category,
                        price=Decimal(price),
                        num_reviews=num_reviews,
                    )
                    for name, category, price, num_reviews in DEMO_PRODUCTS
                ]
            )
            await session.flush()

        product_ids = list((await session.scalars(select(Product.id))).all())
        if not product_ids:
            print("No products available, nothing to track.")
            return

        print(f"Seeding {event_count} interactions...")
        types = list(EVENT_WEIGHTS)
        weights = list(EVENT_WEIGHTS.values())
        now = datetime.now(timezone.utc)
        session.add_all(
            [
                ProductInteraction(
                    product_id=rng.choice(product_ids),
                    interaction_type=rng.choices(types, weights)[0].value,
                    timestamp=now - timedelta(minutes=rng.randint(0, 60 * 24 * 30)),
                    session_id=f"seed-{rng.randint(1, 200)}",
                )
                for _ in range(event_count)
            ]
        )
        await session.commit()

    print("Database seeding completed successfully.")


async def main(event_count: int, seed: int):
    try:
        await seed_data(event_count, seed)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo products and interactions.")
    parser.add_argument("--events", type=int, default=2000, help="Interactions to generate")
    parser.add_argument("--seed", type=int, default=7, help="Random seed")
    args = parser.parse_args()
    asyncio.run(main(args.events, args.seed))
