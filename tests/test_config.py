"""
Unit tests for WeightingConfig and its YAML loader.
"""

import pytest

from config import WeightingConfig, load_config


def test_defaults():
    config = WeightingConfig()

    assert config.default_attribute == "weight"
    assert config.cost_key() == "x-weight"
    assert config.cost_key("p") == "x-p"
    assert config.cost_key("") == "x-weight"
    assert config.label_format is None


def test_validate_rejects_empty_names():
    with pytest.raises(ValueError):
        WeightingConfig(default_attribute="").validate()
    with pytest.raises(ValueError):
        WeightingConfig(cost_prefix="").validate()


def test_load_config(tmp_path):
    path = tmp_path / "weighting.yml"
    path.write_text('default_attribute: probability\nlabel_format: "%0.2f"\n')

    config = load_config(path)

    assert config == WeightingConfig(default_attribute="probability", label_format="%0.2f")
    assert config.cost_key() == "x-probability"


def test_load_empty_config(tmp_path):
    path = tmp_path / "weighting.yml"
    path.write_text("")

    assert load_config(path) == WeightingConfig()


@pytest.mark.parametrize(
    "text",
    [
        "colour: red\n",
        "- weight\n",
        "cost_prefix: ''\n",
        "cost_prefix: 3\n",
        "label_format: 2\n",
        "label_format: ['%s']\n",
    ],
)
def test_load_config_rejects_bad_files(tmp_path, text):
    path = tmp_path / "weighting.yml"
    path.write_text(text)

    with pytest.raises(ValueError):
        load_config(path)


def test_validate_rejects_non_string_label_format():
    with pytest.raises(ValueError):
        WeightingConfig(label_format=2).validate()

    WeightingConfig(label_format="%0.2f").validate()
