from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
import logging
import random

from sqlalchemy.exc import SQLAlchemyError

from database.config import get_items_per_order, get_random_seed, get_seed_count
from database.connection import SessionLocal
from database.models import (
    CATEGORIES,
    MODELS,
    ORDER_STATUSES,
    PAYMENT_MODES,
    Address,
    Customer,
    FoodItem,
    Order,
    OrderItem,
    Payment,
)

logger = logging.getLogger(__name__)


@dataclass
class SeedSummary:
    customers: int = 0
    addresses: int = 0
    food_items: int = 0
    orders: int = 0
    order_items: int = 0
    payments: int = 0


def _cents(rng: random.Random, spread: int, base: int) -> Decimal:
    """Random amount in [base, base + spread / 100) with two decimals"""
    return Decimal(rng.randrange(spread)) / 100 + base


def _commit(db, label: str, rows: list) -> int:
    db.add_all(rows)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Inserting {label} failed: {e}")
        raise
    logger.info(f"Inserted {len(rows)} {label}")
    return len(rows)


def seed_database(db, count=None, items_per_order=None, rng=None, now=None) -> SeedSummary:
    """
    Populate every table with synthetic rows, parents before children.

    Each entity group is committed on its own; a failure aborts the run and
    leaves the groups committed so far in place.
    """
    count = count if count is not None else get_seed_count()
    items_per_order = items_per_order if items_per_order is not None else get_items_per_order()
    if rng is None:
        rng = random.Random(get_random_seed())
    now = now or datetime.now()

    # Later groups read ids and prices of earlier ones; keep them loaded across commits
    expire_on_commit = db.expire_on_commit
    db.expire_on_commit = False
    try:
        return _insert_all(db, count, items_per_order, rng, now)
    finally:
        db.expire_on_commit = expire_on_commit


def _insert_all(db, count, items_per_order, rng, now) -> SeedSummary:
    summary = SeedSummary()
    numbers = range(1, count + 1)

    customers = [
        Customer(name=f"Customer-{n}", email=f"customer{n}@mail.com")
        for n in numbers
    ]
    summary.customers = _commit(db, "customers", customers)

    addresses = [
        Address(customer_id=customer.id, city=f"City-{customer.id}", country="UK")
        for customer in customers
    ]
    summary.addresses = _commit(db, "addresses", addresses)

    # n % 3: 0 -> VEG, 1 -> NON_VEG, 2 -> DRINK
    food_items = [
        FoodItem(
            name=f"Food-{n}",
            price=_cents(rng, 2000, 5),
            category=CATEGORIES[n % 3],
        )
        for n in numbers
    ]
    summary.food_items = _commit(db, "food items", food_items)

    # customer.id % 3: 0 -> CREATED, 1 -> PAID, 2 -> DELIVERED
    orders = [
        Order(
            customer_id=customer.id,
            status=ORDER_STATUSES[customer.id % 3],
            total_amount=_cents(rng, 5000, 20),
        )
        for customer in customers
    ]
    summary.orders = _commit(db, "orders", orders)

    # Independent draws per order, the same food item may be picked twice
    order_items = []
    for order in orders:
        for food_item in rng.choices(food_items, k=items_per_order):
            order_items.append(
                OrderItem(
                    order_id=order.id,
                    food_item_id=food_item.id,
                    quantity=rng.randint(1, 3),
                    price=food_item.price,
                )
            )
    summary.order_items = _commit(db, "order items", order_items)

    payments = [
        Payment(
            order_id=order.id,
            payment_mode=PAYMENT_MODES[order.id % 2],
            payment_status="SUCCESS",
            paid_at=now - timedelta(minutes=order.id),
        )
        for order in orders
    ]
    summary.payments = _commit(db, "payments", payments)

    return summary


def clear_all_data(db):
    """Delete all rows, children before parents"""
    try:
        for model in reversed(MODELS):
            db.query(model).delete()
        db.commit()
        logger.info("All data cleared")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error clearing data: {e}")
        raise


def create_sample_data(count=None, items_per_order=None):
    """Seed the configured database with a fresh session"""
    db = SessionLocal()
    try:
        return seed_database(db, count=count, items_per_order=items_per_order)
    finally:
        db.close()
