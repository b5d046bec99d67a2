from decimal import Decimal

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from database.models import Address, Customer, FoodItem, Order, OrderItem, Payment
from database.schema import create_schema, drop_schema
from database.schema_inspector import SchemaInspector


def test_creates_all_tables(engine):
    assert SchemaInspector(engine).get_tables() == [
        "customer", "address", "food_item", "food_order", "order_item", "payment"
    ]


def test_schema_creation_is_idempotent(engine):
    before = SchemaInspector(engine).snapshot()
    create_schema(engine)
    create_schema(engine)
    after = SchemaInspector(engine).snapshot()
    assert before == after


def test_create_schema_discards_existing_rows(engine, session):
    session.add(Customer(name="Customer-1", email="customer1@mail.com"))
    session.commit()
    session.close()

    create_schema(engine)

    with engine.connect() as connection:
        assert connection.execute(text("SELECT COUNT(*) FROM customer")).scalar_one() == 0


def test_drop_schema_removes_every_table(engine):
    drop_schema(engine)
    assert inspect(engine).get_table_names() == []
    drop_schema(engine)


def test_secondary_indexes(engine):
    indexes = {
        index["name"]: (table, index["columns"], index["unique"])
        for table, info in SchemaInspector(engine).snapshot().items()
        for index in info["indexes"]
    }
    assert indexes == {
        "idx_customer_created_at": ("customer", ["created_at"], False),
        "idx_order_customer_id": ("food_order", ["customer_id"], False),
        "idx_order_order_time": ("food_order", ["order_time"], False),
        "idx_order_status": ("food_order", ["status"], False),
        "idx_food_item_category": ("food_item", ["category"], False),
    }


def test_foreign_keys(engine):
    snapshot = SchemaInspector(engine).snapshot()
    fks = {
        (table, tuple(fk["columns"])): fk["references_table"]
        for table, info in snapshot.items()
        for fk in info["foreign_keys"]
    }
    assert fks == {
        ("address", ("customer_id",)): "customer",
        ("food_order", ("customer_id",)): "customer",
        ("order_item", ("order_id",)): "food_order",
        ("order_item", ("food_item_id",)): "food_item",
        ("payment", ("order_id",)): "food_order",
    }


def test_email_is_unique(session):
    session.add(Customer(name="Customer-1", email="dup@mail.com"))
    session.commit()

    session.add(Customer(name="Customer-2", email="dup@mail.com"))
    with pytest.raises(IntegrityError):
        session.commit()


def test_defaults_applied_on_insert(session):
    customer = Customer(name="Customer-1", email="customer1@mail.com")
    food = FoodItem(name="Food-1", price=Decimal("9.99"), category="VEG")
    session.add_all([customer, food])
    session.commit()

    order = Order(customer_id=customer.id, status="CREATED", total_amount=Decimal("10.00"))
    session.add(order)
    session.commit()

    assert customer.version == 0
    assert customer.created_at is not None
    assert food.version == 0
    assert order.version == 0
    assert order.order_time is not None


def test_order_item_with_unknown_food_item_fails(session):
    customer = Customer(name="Customer-1", email="customer1@mail.com")
    session.add(customer)
    session.commit()
    order = Order(customer_id=customer.id, status="CREATED", total_amount=Decimal("20.00"))
    session.add(order)
    session.commit()

    session.add(OrderItem(order_id=order.id, food_item_id=-1, quantity=1, price=Decimal("5.00")))
    with pytest.raises(IntegrityError):
        session.commit()


def test_address_requires_existing_customer(session):
    session.add(Address(customer_id=12345, city="City-1", country="UK"))
    with pytest.raises(IntegrityError):
        session.commit()


def test_payment_requires_existing_order(session):
    session.add(Payment(order_id=999, payment_mode="CARD", payment_status="SUCCESS"))
    with pytest.raises(IntegrityError):
        session.commit()


def test_deleting_referenced_customer_fails(session):
    customer = Customer(name="Customer-1", email="customer1@mail.com")
    session.add(customer)
    session.commit()
    session.add(Address(customer_id=customer.id, city="City-1", country="UK"))
    session.commit()

    customer_id = customer.id
    with pytest.raises(IntegrityError):
        session.execute(text("DELETE FROM customer WHERE id = :id"), {"id": customer_id})
        session.commit()


def test_describe_lists_tables_and_keys(engine):
    description = SchemaInspector(engine).describe()
    assert "Table: food_order" in description
    assert "FOREIGN KEY: food_item_id REFERENCES food_item(id)" in description
    assert "INDEX: idx_order_status (status)" in description
