"""Tests for the sample records and policies."""

import logging

import pytest

from record_store.exceptions import InputException
from record_store.policy import MIN_SCORE
from record_store.samples import (
    BestAttack,
    BestBalance,
    ConstantPolicy,
    Creature,
    FieldPolicy,
    Vegetable,
    build_policy,
)
from record_store.store import InMemoryStore


@pytest.fixture
def creatures() -> InMemoryStore[Creature]:
    store: InMemoryStore[Creature] = InMemoryStore(BestAttack())
    store.set(Creature(id="pikachu", attack=10, armor=2))
    store.set(Creature(id="pikachu", attack=90, armor=10))
    store.set(Creature(id="bulbasaur", attack=1, armor=-1))
    store.set(Creature(id="coffy", attack=41, armor=60))
    store.set(Creature(id="charmander", attack=40, armor=60))
    return store


def test_best_attack(creatures: InMemoryStore[Creature]) -> None:
    """Test the creature with the highest attack wins."""
    assert creatures.get_best_wiki() == [Creature(id="pikachu", attack=90, armor=10)]


def test_best_balance(creatures: InMemoryStore[Creature]) -> None:
    """Test the most balanced creature wins after switching policy."""
    creatures.set_best_strategy(BestBalance())
    assert creatures.get_best_wiki() == [Creature(id="coffy", attack=41, armor=60)]


def test_balance_score() -> None:
    """Test the balance score is the negated relative deviation."""
    policy = BestBalance()
    assert policy.evaluate(Creature(id="even", attack=50, armor=50)) == 0
    assert policy.evaluate(Creature(id="uneven", attack=40, armor=60)) == pytest.approx(
        -0.4
    )


def test_balance_zero_median(caplog: pytest.LogCaptureFixture) -> None:
    """Test a creature with a zero median gets the sentinel score."""
    with caplog.at_level(logging.WARNING):
        score = BestBalance().evaluate(Creature(id="bulbasaur", attack=1, armor=-1))
    assert score == MIN_SCORE
    assert "Median is 0" in caplog.text


def test_balance_all_degenerate() -> None:
    """Test records that all score the sentinel are tied."""
    store: InMemoryStore[Creature] = InMemoryStore(BestBalance())
    store.set(Creature(id="a", attack=0, armor=0))
    store.set(Creature(id="b", attack=2, armor=-2))
    assert [record.id for record in store.get_best_wiki()] == ["a", "b"]


def test_constant_policy() -> None:
    """Test every vegetable is best under a constant policy."""
    store: InMemoryStore[Vegetable] = InMemoryStore(ConstantPolicy())
    store.set(Vegetable(id="carrot", name="Mighty Carrot"))
    store.set(Vegetable(id="leek", name="Lanky Leek"))
    assert [record.id for record in store.get_best_wiki()] == ["carrot", "leek"]


def test_field_policy(creatures: InMemoryStore[Creature]) -> None:
    """Test scoring by a named numeric field."""
    assert creatures.get_best_by_score(FieldPolicy("armor").evaluate) == [
        Creature(id="coffy", attack=41, armor=60),
        Creature(id="charmander", attack=40, armor=60),
    ]


def test_field_policy_not_numeric() -> None:
    """Test a missing or non numeric field gets the sentinel score."""
    policy = FieldPolicy("name")
    assert policy.evaluate(Vegetable(id="carrot", name="Mighty Carrot")) == MIN_SCORE
    assert FieldPolicy("weight").evaluate(Creature(id="a")) == MIN_SCORE


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("attack", "BestAttack()"),
        ("balance", "BestBalance()"),
        ("constant", "ConstantPolicy(0.0)"),
        ("field:armor", "FieldPolicy('armor')"),
    ],
)
def test_build_policy(name: str, expected: str) -> None:
    """Test building policies by name."""
    assert repr(build_policy(name)) == expected


@pytest.mark.parametrize("name", ["speed", "field:"])
def test_build_policy_invalid(name: str) -> None:
    """Test unknown policy names are rejected."""
    with pytest.raises(InputException):
        build_policy(name)
