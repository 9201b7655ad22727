from types import SimpleNamespace
from unittest import mock

import pytest
from bson import ObjectId

from dadops.cli import load_config, main
from dadops.jokes import JOKE_URL


def _set_home(monkeypatch, path):
    monkeypatch.setenv("HOME", str(path))
    monkeypatch.setenv("USERPROFILE", str(path))


def test_load_config_explicit_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv("NAME", raising=False)
    config = tmp_path / "settings.yaml"
    config.write_text("name: dadops\n", encoding="utf-8")
    assert load_config(str(config)) == (config, {"name": "dadops"})


def test_load_config_missing_file(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) == (None, {})


def test_load_config_malformed_file(tmp_path):
    config = tmp_path / "broken.yaml"
    config.write_text("key: [unclosed\n", encoding="utf-8")
    assert load_config(str(config)) == (None, {})


def test_load_config_searches_home(tmp_path, monkeypatch):
    _set_home(monkeypatch, tmp_path)
    monkeypatch.delenv("PORT", raising=False)
    config = tmp_path / ".Devops.yaml"
    config.write_text("port: 9000\n", encoding="utf-8")
    assert load_config() == (config, {"port": 9000})


def test_load_config_nothing_in_home(tmp_path, monkeypatch):
    _set_home(monkeypatch, tmp_path)
    assert load_config() == (None, {})


def test_load_config_environment_overrides(tmp_path, monkeypatch):
    config = tmp_path / "settings.yaml"
    config.write_text("name: dadops\n", encoding="utf-8")
    monkeypatch.setenv("NAME", "from-env")
    _, values = load_config(str(config))
    assert values["name"] == "from-env"


def test_main_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "dadjoke cli" in capsys.readouterr().out


def test_main_unknown_command_exits_with_one():
    with pytest.raises(SystemExit) as info:
        main(["bogus"])
    assert info.value.code == 1


def test_main_random_prints_joke(tmp_path, capsys):
    config = tmp_path / "settings.yaml"
    config.write_text("name: dadops\n", encoding="utf-8")
    response = mock.MagicMock()
    response.content = b'{"id": "x1", "joke": "a fine joke", "status": 200}'
    with mock.patch("requests.get", return_value=response) as get:
        assert main(["--config", str(config), "random"]) == 0
    assert get.call_args[0][0] == JOKE_URL
    out = capsys.readouterr().out
    assert f"Using config file: {config}" in out
    assert "a fine joke" in out


def test_main_verify_checks_url_and_database(tmp_path, capsys):
    response = mock.MagicMock(status_code=200, reason="OK")
    client = mock.MagicMock()
    collection = client.get_database.return_value.get_collection.return_value
    collection.insert_one.side_effect = lambda document: SimpleNamespace(
        inserted_id=document.get("_id", ObjectId())
    )
    with mock.patch("requests.head", return_value=response) as head, mock.patch(
        "pymongo.MongoClient", return_value=client
    ):
        assert main(["--config", str(tmp_path / "absent.yaml"), "verify"]) == 0
    assert head.call_args[0][0] == JOKE_URL
    assert collection.insert_one.call_count == 2
    out = capsys.readouterr().out
    assert "200 OK" in out
    assert "Using config file" not in out