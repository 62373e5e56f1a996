from __future__ import annotations
from collections.abc import Mapping
from copy import deepcopy
import json
import logging
import os
from typing import Any
import dotenv

from PyPotGen.Helpers import NormalizeExtension
from PyPotGen.Helpers.Resources import config_dir
from PyPotGen.Helpers.Settings import GetIntSetting, GetStrSetting, GetStringListSetting
from PyPotGen.PotError import SettingsError
from PyPotGen.PotWriter import default_generator

settings_path = os.path.join(config_dir, 'settings.json')

# Load environment variables from .env file
dotenv.load_dotenv()

def env_int(key : str, default : int|None = None) -> int|None:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return int(value)

def env_str(key : str, default : str|None = None) -> str|None:
    value = os.getenv(key, default)
    return str(value) if value is not None else None

def env_list(key : str, default : list[str]) -> list[str]:
    value = os.getenv(key)
    if value is None:
        return list(default)
    return [ item.strip() for item in value.split(',') if item.strip() ]

default_settings : dict[str, Any] = {
    'domain': env_str('POTGEN_DOMAIN', None),
    'extensions': env_list('POTGEN_EXTENSIONS', ['.php']),
    'exclude_dirs': env_list('POTGEN_EXCLUDE_DIRS', ['vendor', 'node_modules']),
    'max_threads': env_int('POTGEN_MAX_THREADS', 4),
    'encoding': env_str('POTGEN_ENCODING', 'utf-8'),
    'generator': env_str('POTGEN_GENERATOR', default_generator),
}

class Options(dict[str, Any]):
    def __init__(self, settings : Mapping[str, Any]|None = None, **kwargs : Any):
        """ Initialise the Options object with default options and any provided options. """
        super().__init__()
        self.update(deepcopy(default_settings))

        if settings:
            # Remove None values from options and merge with defaults
            self.update({ k: deepcopy(v) for k, v in settings.items() if v is not None })

        self.update({ k: v for k, v in kwargs.items() if v is not None })

    @property
    def domain(self) -> str|None:
        return GetStrSetting(self, 'domain')

    @property
    def extensions(self) -> list[str]:
        """ source file extensions to scan, lower case with a leading dot """
        return [ NormalizeExtension(extension) for extension in GetStringListSetting(self, 'extensions') ]

    @property
    def exclude_dirs(self) -> list[str]:
        return GetStringListSetting(self, 'exclude_dirs')

    @property
    def max_threads(self) -> int:
        max_threads = GetIntSetting(self, 'max_threads')
        if max_threads is None:
            return 1
        if max_threads < 1:
            raise SettingsError(f"max_threads must be at least 1, got {max_threads}")
        return max_threads

    @property
    def encoding(self) -> str:
        return GetStrSetting(self, 'encoding') or 'utf-8'

    @property
    def generator(self) -> str:
        return GetStrSetting(self, 'generator') or default_generator

    def GetSettings(self) -> dict[str, Any]:
        """
        Get a copy of the settings dictionary with only the default keys included
        """
        return { key: deepcopy(self.get(key)) for key in self.keys() & default_settings.keys() }

    def LoadSettings(self, path : str|None = None) -> bool:
        """
        Load settings from a JSON file, by default the user's settings.json
        """
        path = path or settings_path
        if not os.path.exists(path):
            return False

        try:
            with open(path, "r", encoding="utf-8") as settings_file:
                settings = json.load(settings_file)

        except (OSError, ValueError) as e:
            logging.debug(f"Error loading settings from {path}: {e}")
            logging.error(f"Error loading settings from {path}")
            return False

        if not isinstance(settings, dict):
            raise SettingsError(f"Settings file {path} must contain a JSON object")

        if not settings:
            return False

        self.update({ key: value for key, value in settings.items() if key in default_settings and value is not None })
        return True
