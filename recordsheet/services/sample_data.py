"""Synthetic sales statistics used by the demo command and tests."""
import random
import uuid
from collections import namedtuple

from ..constants import AggregationFunction
from ..models import PivotSettings

SalesStat = namedtuple('SalesStat', ['PRODUCT', 'MONTH', 'CA_NET', 'CA_BRUT', 'QTE_VENDUE', 'GUID'])


def generate_sales_stats(product_count, year=2022, seed=None):
    """Yields twelve monthly rows per product, lazily."""
    rng = random.Random(seed)
    for j in range(product_count):
        product = f"TEST{j}"
        guid = uuid.UUID(int=rng.getrandbits(128), version=4)
        for month in range(1, 13):
            yield SalesStat(
                PRODUCT=product,
                MONTH=f"{year}-{month:02d}",
                CA_NET=rng.randrange(100),
                CA_BRUT=rng.randrange(200),
                QTE_VENDUE=rng.randrange(100),
                GUID=guid,
            )


def sales_pivot_settings():
    return PivotSettings(
        row_labels=['PRODUCT', 'MONTH'],
        column_labels={
            'CA_NET': AggregationFunction.SUM,
            'CA_BRUT': AggregationFunction.SUM,
            'QTE_VENDUE': AggregationFunction.SUM,
        },
    )
