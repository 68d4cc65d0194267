# Import all models to ensure they are registered with SQLAlchemy
# This ensures all relationships can be resolved properly

from .product import Product
from .product_interaction import ProductInteraction

__all__ = [
    "Product",
    "ProductInteraction",
]
