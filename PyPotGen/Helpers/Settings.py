"""
Type-safe settings retrieval and coercion functions.

Settings come from environment variables, JSON settings files and keyword arguments,
so values may arrive as strings that need converting to the expected type.
"""
from collections.abc import Mapping
from typing import Any

import regex

from PyPotGen.PotError import SettingsError

def GetIntSetting(settings : Mapping[str, Any], key : str, default : int|None = None) -> int|None:
    """
    Safely retrieve an integer setting from a settings dictionary.

    Args:
        settings: The settings dictionary
        key: The setting key
        default: Default value if key is not present

    Returns:
        Integer value of the setting or None

    Raises:
        SettingsError: If the setting cannot be converted to int
    """
    value = settings.get(key, default)
    if value is None:
        return None

    if isinstance(value, bool):
        raise SettingsError(f"Cannot convert setting '{key}' with value {repr(value)} to int")

    if isinstance(value, (int, float)):
        return int(value)
    elif isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass

    raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to int")

def GetStrSetting(settings : Mapping[str, Any], key : str, default : str|None = None) -> str|None:
    """
    Safely retrieve a string setting from a settings dictionary.
    """
    value = settings.get(key, default)
    if value is None:
        return None
    elif isinstance(value, str):
        return value
    elif isinstance(value, (int, float, bool)):
        return str(value)

    raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to str")

def GetStringListSetting(settings : Mapping[str, Any], key : str, default : list[str]|None = None) -> list[str]:
    """
    Safely retrieve a list of strings, accepting a comma or semicolon separated string.

    Raises:
        SettingsError: If the setting cannot be converted to a list of strings
    """
    value = settings.get(key, default)
    if value is None:
        return []

    if isinstance(value, str):
        values = regex.split(r'[;,]', value)
    elif isinstance(value, (list, tuple, set)):
        values = list(value)
    else:
        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to list")

    if not all(isinstance(item, str) for item in values):
        raise SettingsError(f"Setting '{key}' must contain only strings")

    return [ item.strip() for item in values if item.strip() ]
