"""Tests for the composition root and time providers."""
from datetime import datetime
from unittest.mock import MagicMock

from order_processing import container
from order_processing.clock import FixedTimeProvider, SystemTimeProvider
from order_processing.services.discounts import LoyaltyDiscountRule


def test_system_time_provider_returns_current_time():
    before = datetime.now()
    now = SystemTimeProvider().now()
    assert before <= now <= datetime.now()


def test_fixed_time_provider_always_returns_same_instant():
    instant = datetime(2025, 7, 2, 12, 0, 0)
    clock = FixedTimeProvider(instant)
    assert clock.now() == instant
    assert clock.now() == instant


def test_default_time_provider_honours_fixed_now(monkeypatch):
    instant = datetime(2024, 1, 1)
    monkeypatch.setattr(container.settings, "FIXED_NOW", instant)

    provider = container.default_time_provider()

    assert isinstance(provider, FixedTimeProvider)
    assert provider.now() == instant


def test_default_time_provider_is_system_clock(monkeypatch):
    monkeypatch.setattr(container.settings, "FIXED_NOW", None)

    assert isinstance(container.default_time_provider(), SystemTimeProvider)


def test_processor_reads_the_clock_once_per_build(session_factory):
    time_provider = MagicMock()
    time_provider.now.return_value = datetime(2025, 7, 2)

    processor = container.build_customer_order_processor(session_factory, time_provider)

    time_provider.now.assert_called_once()
    assert processor.repository_factory.time_provider.now() == datetime(2025, 7, 2)
    rules = processor.order_processing_service.discount_calculator.rules
    loyalty = next(r for r in rules if isinstance(r, LoyaltyDiscountRule))
    assert loyalty.time_provider is processor.repository_factory.time_provider
