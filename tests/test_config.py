"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details
"""

import json
import logging

import pytest

from neotx import config


@pytest.fixture
def cfg(tmp_path):
    return config.NeoTxConfig(args=[], dataDir=str(tmp_path))


def test_defaults(cfg, tmp_path):
    assert cfg.path == str(tmp_path / config.CONFIG_NAME)
    assert cfg.get("loglevel") == "INFO"
    assert cfg.get("logfile") is None
    assert cfg.logLevel() == logging.INFO
    assert cfg.logFile() is None
    assert cfg.get("nope") is None
    assert cfg.get("loglevel", "nested") is None


def test_set_save(cfg, tmp_path):
    cfg.set("loglevel", "warning")
    cfg.set("wallet", {"asset": "neo"})
    assert cfg.get("wallet", "asset") == "neo"
    assert cfg.logLevel() == logging.WARNING
    cfg.save()

    with open(tmp_path / config.CONFIG_NAME) as f:
        saved = json.load(f)
    assert saved["loglevel"] == "warning"

    reloaded = config.NeoTxConfig(args=[], dataDir=str(tmp_path))
    assert reloaded.get("wallet", "asset") == "neo"
    assert reloaded.logLevel() == logging.WARNING


def test_flags(tmp_path):
    logPath = str(tmp_path / "neotx.log")
    cfg = config.NeoTxConfig(
        args=["--debug", "--logfile", logPath, "--other"], dataDir=str(tmp_path)
    )
    assert cfg.logLevel() == logging.DEBUG
    assert cfg.logFile() == logPath
    cfg.prepareLogging()
    log = logging.getLogger("neotx-config-test")
    log.warning("written")
    assert (tmp_path / "neotx.log").is_file()


def test_unknown_level(cfg):
    cfg.set("loglevel", "chatty")
    assert cfg.logLevel() == logging.INFO


def test_load(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "DATA_DIR", str(tmp_path))
    monkeypatch.setattr(config, "neoTxConfig", None)
    first = config.load(args=[])
    assert first is config.load()
    assert first.dataDir == str(tmp_path)
