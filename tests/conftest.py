"""Pytest configuration and fixtures for car_stats tests."""

from pathlib import Path

import pytest

HEADER = (
    "Brand,Model,Body,Color,Fuel,Year,Transmission,Engine,Kilometers,"
    "Gov,Condition,Price"
)


@pytest.fixture
def valid_row() -> str:
    """Return a 12-field row whose target fields are all numeric."""
    return "a,b,c,d,e,2020,f,1.6,50000,i,j,500000"


@pytest.fixture
def sample_lines() -> list[str]:
    """Return a header plus a mix of valid and malformed listing rows."""
    return [
        HEADER,
        "Toyota,Corolla,Sedan,White,Benzine,2018,Automatic,1.6,85000,Cairo,Used,420000",
        "Hyundai,Elantra,Sedan,Black,Benzine,2015,Automatic,1.6,140000,Giza,Used,310000",
        "Fiat,128,Sedan,Red,Benzine",  # too few fields
        "BMW,320i,Sedan,Blue,Benzine,2020,Automatic,diesel,30000,Cairo,Used,1500000",  # non-numeric
        "Kia,Cerato,Sedan,Silver,Benzine,2019,Automatic,2.0,60000,Alex,Used,650000",
    ]


@pytest.fixture
def sample_csv(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Write sample_lines to a CSV file and return its path."""
    path = tmp_path / "listings.csv"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
