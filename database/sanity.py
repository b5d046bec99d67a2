"""Post-seed sanity checks: row volumes and orphaned foreign keys"""
from collections import OrderedDict
from typing import Dict

from sqlalchemy import func, literal, select, union_all
from sqlalchemy.orm import aliased

from database.models import Address, Customer, FoodItem, Order, OrderItem, Payment
from database.schema import TABLES

# (child column, parent model) for every foreign key in the schema
FOREIGN_KEYS = (
    (Address.__table__.c.customer_id, Customer),
    (Order.__table__.c.customer_id, Customer),
    (OrderItem.__table__.c.order_id, Order),
    (OrderItem.__table__.c.food_item_id, FoodItem),
    (Payment.__table__.c.order_id, Order),
)


def count_rows(connection) -> Dict[str, int]:
    """Row count per table, in dependency order, using a single UNION ALL query"""
    query = union_all(*[
        select(literal(table.name).label("table_name"), func.count().label("records"))
        .select_from(table)
        for table in TABLES
    ])
    counts = {row.table_name: row.records for row in connection.execute(query)}
    return OrderedDict((table.name, counts.get(table.name, 0)) for table in TABLES)


def expected_counts(count: int = 300, items_per_order: int = 3) -> Dict[str, int]:
    return OrderedDict([
        ("customer", count),
        ("address", count),
        ("food_item", count),
        ("food_order", count),
        ("order_item", count * items_per_order),
        ("payment", count),
    ])


def find_orphans(connection) -> Dict[str, int]:
    """Number of child rows whose referenced parent does not exist, per foreign key"""
    orphans = OrderedDict()
    for column, parent in FOREIGN_KEYS:
        target = aliased(parent)
        query = (
            select(func.count())
            .select_from(column.table)
            .outerjoin(target, column == target.id)
            .where(target.id.is_(None))
        )
        orphans[f"{column.table.name}.{column.name}"] = connection.execute(query).scalar_one()
    return orphans


def format_report(counts: Dict[str, int]) -> str:
    """Format row counts as a plain-text table"""
    width = max(len("table_name"), *(len(name) for name in counts))
    output = [f"{'table_name'.ljust(width)} | records", "-" * (width + 10)]
    for name, records in counts.items():
        output.append(f"{name.ljust(width)} | {records}")
    return "\n".join(output)
