"""
Copyright (c) 2020, the NeoTx developers
See LICENSE for details

Configuration settings for neotx.
"""

import argparse
import logging
import os

from appdirs import AppDirs

from neotx.util import helpers


# Set the data directory in a OS-appropriate location.
_ad = AppDirs("NeoTx", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "neotx.conf"

# Settings used when the configuration file has no value.
DefaultConfig = {"loglevel": "INFO", "logfile": None}

log = helpers.getLogger("CONFIG")


class NeoTxConfig:
    """
    NeoTxConfig is configuration settings. The configuration file is JSON
    formatted. Command line flags take precedence over the file.
    """

    def __init__(self, args=None, dataDir=None):
        """
        Args:
            args (list(str)): optional. The command line arguments. default
                None reads sys.argv.
            dataDir (str): optional. The directory holding the configuration
                file. default DATA_DIR.
        """
        self.dataDir = dataDir if dataDir else DATA_DIR
        helpers.mkdir(self.dataDir)
        self.path = os.path.join(self.dataDir, CONFIG_NAME)
        self.file = helpers.fetchSettingsFile(self.path)
        parser = argparse.ArgumentParser()
        parser.add_argument("--debug", action="store_true", help="debug logging")
        parser.add_argument("--logfile", help="rotating log file path")
        parsed, unknown = parser.parse_known_args(args)
        if unknown:
            log.warning("ignoring unknown arguments: %r", unknown)
        self.debug = parsed.debug
        self.logfile = parsed.logfile
        self.normalize()

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.
        """
        self.file[k] = v

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        d = self.file
        rVal = None
        for k in keys:
            if not isinstance(d, dict) or k not in d:
                return None
            rVal = d[k]
            d = rVal
        return rVal

    def normalize(self):
        """
        Fill in defaults for missing settings.
        """
        for k, v in DefaultConfig.items():
            self.file.setdefault(k, v)

    def logLevel(self):
        """
        The configured log level. --debug overrides the file setting. An
        unknown level name falls back to INFO.

        Returns:
            int: The logging level.
        """
        if self.debug:
            return logging.DEBUG
        lvl = logging.getLevelName(str(self.get("loglevel")).upper())
        if not isinstance(lvl, int):
            log.warning("unknown log level %r", self.get("loglevel"))
            return logging.INFO
        return lvl

    def logFile(self):
        """
        Returns:
            str or None: The log file path, from the command line or the file.
        """
        return self.logfile if self.logfile else self.get("logfile")

    def prepareLogging(self):
        """
        Set up logging according to the configuration.
        """
        helpers.prepareLogging(self.logFile(), logLvl=self.logLevel())

    def save(self):
        """
        Save the file.
        """
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)


neoTxConfig = None


def load(args=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular `load`
    function will return the same instance.

    Returns:
        NeoTxConfig: The current configuration.
    """
    global neoTxConfig
    if not neoTxConfig:
        neoTxConfig = NeoTxConfig(args)
    return neoTxConfig
