import json

import pytest

from config import load_config
from constants import DEFAULT_CONFIG
from exceptions import ConfigurationError


def test_missing_file_gives_a_copy_of_the_defaults(tmp_path):
    config = load_config(str(tmp_path / "absent.json"))
    assert config == DEFAULT_CONFIG

    config['simulation']['decay'] = 99.0
    assert DEFAULT_CONFIG['simulation']['decay'] != 99.0


def test_file_values_are_merged_over_the_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "master_seed": 5,
        "simulation": {"palette": "blue", "decay": 3.5},
    }))

    config = load_config(str(path))

    assert config['master_seed'] == 5
    assert config['simulation']['palette'] == "blue"
    assert config['simulation']['decay'] == 3.5
    assert config['simulation']['speed_ms'] == DEFAULT_CONFIG['simulation']['speed_ms']
    assert config['logging'] == DEFAULT_CONFIG['logging']


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError) as excinfo:
        load_config(str(path))
    assert excinfo.value.config_path == str(path)


def test_non_object_document_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigurationError):
        load_config(str(path))
