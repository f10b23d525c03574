import pytest

from routegraph.config import AnalysisConfig


def test_defaults():
    config = AnalysisConfig()
    assert config.iTop_n == 10
    assert config.iLow_degree_max == 2
    assert config.dHigh_degree_fraction == 0.8
    assert config.iLow_degree_percent == 60
    assert config.iHigh_degree_percent == 5


@pytest.mark.parametrize("kwargs", [
    {"iTop_n": -1},
    {"iLow_degree_max": -1},
    {"dHigh_degree_fraction": 1.5},
    {"iLow_degree_percent": 101},
    {"iHigh_degree_percent": -5},
    {"sLocation_name": ""},
])
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        AnalysisConfig(**kwargs)


def test_describe_lists_fields():
    text = AnalysisConfig(iTop_n=3).describe()
    assert "iTop_n = 3" in text
    assert "sLocation_name = 'airports'" in text
