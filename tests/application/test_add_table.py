"""Tests for the AddTable use case."""

import pytest

from rms.application.add_table import AddTableHandler
from rms.domain.exceptions import ValidationError
from tests.fakes import FakeTableRepository


class TestAddTable:

    def test_assigns_id(self):
        repo = FakeTableRepository()
        table = AddTableHandler(repo).handle(number=5, capacity=4, location="patio")
        assert table.id == 1
        assert repo.exists_by_id(1)

    def test_duplicate_number_rejected(self):
        repo = FakeTableRepository()
        handler = AddTableHandler(repo)
        handler.handle(number=5, capacity=4)
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle(number=5, capacity=2)

    def test_zero_capacity_rejected(self):
        with pytest.raises(ValidationError, match="capacity"):
            AddTableHandler(FakeTableRepository()).handle(number=1, capacity=0)
