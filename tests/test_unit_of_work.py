"""Tests for SqlUnitOfWork transaction scope."""
import pytest

from order_processing.models import Inventory
from order_processing.unit_of_work import SqlUnitOfWork, SqlUnitOfWorkFactory


def stock_of(session_factory, product_id):
    with session_factory() as check:
        return check.get(Inventory, product_id).stock_quantity


def test_commit_persists_changes(session_factory, seeded):
    with SqlUnitOfWorkFactory(session_factory).create() as uow:
        uow.begin()
        uow.session.get(Inventory, 1).stock_quantity = 3
        uow.commit()

    assert stock_of(session_factory, 1) == 3


def test_rollback_discards_changes(session_factory, seeded):
    with SqlUnitOfWork(session_factory) as uow:
        uow.begin()
        uow.session.get(Inventory, 1).stock_quantity = 3
        uow.session.flush()
        uow.rollback()

    assert stock_of(session_factory, 1) == 10


def test_leaving_scope_without_commit_rolls_back(session_factory, seeded):
    with SqlUnitOfWork(session_factory) as uow:
        uow.begin()
        uow.session.get(Inventory, 1).stock_quantity = 3
        uow.session.flush()

    assert uow.transaction is None
    assert stock_of(session_factory, 1) == 10


def test_leaving_scope_on_error_rolls_back(session_factory, seeded):
    with pytest.raises(RuntimeError):
        with SqlUnitOfWork(session_factory) as uow:
            uow.begin()
            uow.session.get(Inventory, 1).stock_quantity = 3
            uow.session.flush()
            raise RuntimeError("boom")

    assert stock_of(session_factory, 1) == 10


def test_commit_and_rollback_without_begin_are_noops(session_factory):
    with SqlUnitOfWork(session_factory) as uow:
        uow.commit()
        uow.rollback()

    assert uow.transaction is None


def test_factory_creates_independent_units(session_factory):
    factory = SqlUnitOfWorkFactory(session_factory)
    first, second = factory.create(), factory.create()

    assert first.session is not second.session
    first.close()
    second.close()


def test_factory_requires_session_factory():
    with pytest.raises(ValueError):
        SqlUnitOfWorkFactory(None)
