"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_counting_reader,
    make_pack,
    make_reader,
    make_service,
)

__all__ = [
    "make_counting_reader",
    "make_pack",
    "make_reader",
    "make_service",
]
