"""
Demo Data

Dishes and orders loaded into empty stores at startup when
SEED_DATA is enabled.
"""

import logging

from grubdash.models import Dish, Order
from grubdash.store import get_dish_store, get_order_store

logger = logging.getLogger(__name__)

DISHES = [
    {
        "id": "3c637d011d844ebab1205fef8a7e36ea",
        "name": "Broccoli and beetroot stir fry",
        "description": "Crunchy stir fry featuring fresh broccoli and beetroot",
        "image_url": "https://images.pexels.com/photos/4144234/pexels-photo-4144234.jpeg",
        "price": 15,
    },
    {
        "id": "d351db2b49b69679504652ea1cf38241",
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg",
        "price": 19,
    },
    {
        "id": "90c3d873684bf381dfab29034b5bba73",
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg",
        "price": 6,
    },
]

ORDERS = [
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": "out-for-delivery",
        "dishes": [{**DISHES[0], "quantity": 1}],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "delivered",
        "dishes": [{**DISHES[1], "quantity": 2}],
    },
    {
        "id": "7b1fb5ec10e83d1d4e0a5a5a1a2e8fb7",
        "deliverTo": "221B Baker Street, London",
        "mobileNumber": "(020) 7224-3688",
        "status": "pending",
        "dishes": [{**DISHES[2], "quantity": 3}],
    },
]


def seed_stores() -> None:
    """Load the demo dishes and orders into the current stores."""
    dishes = get_dish_store()
    orders = get_order_store()

    for record in DISHES:
        dishes.insert(Dish(**record))
    for record in ORDERS:
        orders.insert(Order(**{**record, "dishes": [dict(item) for item in record["dishes"]]}))

    logger.info(f"Seeded {len(DISHES)} dishes and {len(ORDERS)} orders")
