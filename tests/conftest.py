"""Shared fixtures: in-memory database, fixed clock and seed data."""
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from order_processing.clock import FixedTimeProvider
from order_processing.models import (
    Base, Customer, Product, Inventory, Order, OrderItem, OrderLog, OrderStatus
)
from order_processing.schemas.customer import CustomerResponse
from order_processing.schemas.order import OrderItemResponse, OrderResponse

FIXED_NOW = datetime(2025, 7, 2, 12, 0, 0)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FixedTimeProvider(FIXED_NOW)


@pytest.fixture
def seeded(session_factory):
    """
    Customers:
      1 - VIP, registered 10 years ago, order 1: 2 x Laptop @ 6000 (in stock)
      2 - regular, registered today, order 2: 1 x Mouse @ 500 (in stock)
      3 - regular, registered next year, order 3: 1 x Monitor @ 6000 (no stock)
    Customer 1 also has order 4, already Ready.
    """
    session = session_factory()
    session.add_all([
        Customer(id=1, name="Alice VIP", email="alice@shop.test", is_vip=True,
                 registration_date=datetime(2015, 7, 2)),
        Customer(id=2, name="Bob Regular", email="bob@shop.test", is_vip=False,
                 registration_date=datetime(2025, 7, 2)),
        Customer(id=3, name="Carol Future", email="carol@shop.test", is_vip=False,
                 registration_date=datetime(2026, 7, 2)),
        Product(id=1, name="Laptop", category="Electronics", price=Decimal("6000.00")),
        Product(id=2, name="Mouse", category="Accessories", price=Decimal("500.00")),
        Product(id=3, name="Monitor", category="Electronics", price=Decimal("6000.00")),
        Product(id=4, name="Keyboard", category="Accessories", price=Decimal("800.00")),
    ])
    session.flush()
    session.add_all([
        Inventory(product_id=1, stock_quantity=10),
        Inventory(product_id=2, stock_quantity=100),
        Inventory(product_id=3, stock_quantity=0),
        Order(id=1, customer_id=1, order_date=datetime(2025, 6, 1), total_amount=Decimal("0"),
              status=OrderStatus.PENDING.value),
        Order(id=2, customer_id=2, order_date=datetime(2025, 6, 2), total_amount=Decimal("0"),
              status=OrderStatus.PENDING.value),
        Order(id=3, customer_id=3, order_date=datetime(2025, 6, 3), total_amount=Decimal("0"),
              status=OrderStatus.PENDING.value),
        Order(id=4, customer_id=1, order_date=datetime(2025, 5, 1), total_amount=Decimal("100.00"),
              status=OrderStatus.READY.value),
    ])
    session.flush()
    session.add_all([
        OrderItem(id=1, order_id=1, product_id=1, quantity=2, unit_price=Decimal("6000.00")),
        OrderItem(id=2, order_id=2, product_id=2, quantity=1, unit_price=Decimal("500.00")),
        OrderItem(id=3, order_id=3, product_id=3, quantity=1, unit_price=Decimal("6000.00")),
        OrderItem(id=4, order_id=4, product_id=2, quantity=1, unit_price=Decimal("100.00")),
    ])
    session.commit()
    session.close()


@pytest.fixture
def make_customer():
    def _make(is_vip=False, registration_date=FIXED_NOW, customer_id=1):
        return CustomerResponse(
            id=customer_id,
            name="Test Customer",
            email="test@shop.test",
            is_vip=is_vip,
            registration_date=registration_date,
        )
    return _make


@pytest.fixture
def make_order():
    def _make(items=(), order_id=1, customer_id=1):
        """items: iterable of (quantity, unit_price) pairs, or None for "not loaded"."""
        if items is None:
            loaded = None
        else:
            loaded = [
                OrderItemResponse(
                    id=index + 1,
                    order_id=order_id,
                    product_id=index + 1,
                    quantity=quantity,
                    unit_price=Decimal(str(unit_price)),
                )
                for index, (quantity, unit_price) in enumerate(items)
            ]
        return OrderResponse(
            id=order_id,
            customer_id=customer_id,
            order_date=FIXED_NOW,
            items=loaded,
        )
    return _make


def snapshot(session_factory):
    """Orders, stock levels and logs as plain tuples"""
    with session_factory() as s:
        orders = [
            (o.id, o.status, o.total_amount, o.discount_percent, o.discount_amount)
            for o in s.query(Order).order_by(Order.id)
        ]
        stock = [(i.product_id, i.stock_quantity) for i in s.query(Inventory).order_by(Inventory.product_id)]
        logs = [(log.order_id, log.log_date, log.message) for log in s.query(OrderLog).order_by(OrderLog.id)]
    return orders, stock, logs
