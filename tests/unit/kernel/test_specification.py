"""Unit tests for the specification building blocks."""

from __future__ import annotations

from car_inventory.kernel.ddd import AndSpecification, BaseSpecification, MatchAll, all_of


class IsEven(BaseSpecification[int]):
    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate % 2 == 0


class IsPositive(BaseSpecification[int]):
    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate > 0


class TestSpecification:
    def test_and_operator(self) -> None:
        spec = IsEven() & IsPositive()
        assert isinstance(spec, AndSpecification)
        assert spec.is_satisfied_by(4)
        assert not spec.is_satisfied_by(-4)
        assert not spec.is_satisfied_by(3)

    def test_named_and(self) -> None:
        assert IsEven().and_(IsPositive()).is_satisfied_by(2)

    def test_match_all(self) -> None:
        assert MatchAll().is_satisfied_by(object())

    def test_all_of_empty_accepts_everything(self) -> None:
        spec = all_of([])
        assert spec.is_satisfied_by(-7)

    def test_all_of_is_conjunction(self) -> None:
        spec = all_of([IsEven(), IsPositive()])
        assert [n for n in range(-4, 5) if spec.is_satisfied_by(n)] == [2, 4]
