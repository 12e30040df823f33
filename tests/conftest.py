"""Shared pytest configuration and fixtures for multisort tests."""

from dataclasses import dataclass
from datetime import date

import pandas as pd
import pytest


@dataclass
class Person:
    name: str
    born: date
    team: str


@pytest.fixture
def users() -> list:
    return [
        {"user": "foo", "age": 24},
        {"user": "bar", "age": 7},
        {"user": "foo ", "age": 8},
        {"user": "bar ", "age": 29},
    ]


@pytest.fixture
def people() -> list:
    return [
        Person("Alice", date(1990, 5, 1), "eng"),
        Person("Bob", date(1985, 2, 14), "sales"),
        Person("Charlie", date(1990, 5, 1), "eng"),
        Person("Diana", date(1979, 11, 30), "eng"),
        Person("Eve", date(1985, 2, 14), "hr"),
    ]


@pytest.fixture
def employees() -> pd.DataFrame:
    return pd.DataFrame({
        "name": ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Heidi"],
        "age": [30, 45, 28, 35, 50, 33, 29, 40],
        "dept": ["eng", "eng", "sales", "eng", "hr", "sales", "hr", "eng"],
        "salary": [90000, 120000, 65000, 95000, 80000, 70000, 75000, 110000],
    })
