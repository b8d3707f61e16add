import pytest

from clima.models import Record


def make_record(temp, year=2000, month="Jan", country="United States", code=None):
    """Build a Record with short positional defaults."""
    return Record(
        temperature_celsius=temp,
        country=country,
        year=year,
        month=month,
        country_code=code or country[:3].upper(),
    )


@pytest.fixture
def rec():
    """Factory fixture for single records."""
    return make_record


@pytest.fixture
def base_records():
    """Ten observations over three countries, two months and three years."""
    return [
        make_record(5.0, 2000, "Jan", "United States", "USA"),
        make_record(15.0, 2001, "Jan", "United States", "USA"),
        make_record(1.0, 2000, "Jan", "Canada", "CAN"),
        make_record(-3.0, 2016, "Jan", "Canada", "CAN"),
        make_record(8.0, 2016, "Jan", "United States", "USA"),
        make_record(20.0, 2000, "Jul", "United States", "USA"),
        make_record(18.0, 2000, "Jul", "Canada", "CAN"),
        make_record(25.0, 2016, "Jul", "Mexico", "MEX"),
        make_record(12.0, 2000, "Jan", "Mexico", "MEX"),
        make_record(14.0, 2016, "Jan", "Mexico", "MEX"),
    ]


@pytest.fixture
def csv_file(tmp_path, base_records):
    """The base records written out as a dataset CSV."""
    lines = ["Temperature,Year,Month,Country,Country_Code"]
    for r in base_records:
        lines.append(f"{r.temperature_celsius}, {r.year}, {r.month}, {r.country}, {r.country_code}")
    path = tmp_path / "world_temp.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
