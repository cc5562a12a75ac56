import json
from dataclasses import replace
from typing import Callable, List

from calc_service.errors import LoadingException

SECTIONS = {
    "server": ("host", "port"),
    "client": ("timeout", "retries"),
}


class ConfigLoader:
    def __init__(self, path, logger=None):
        self.path = path
        self.logger = logger

    def load_config(self):
        with open(self.path, "r", encoding="utf-8") as f:
            config = json.load(f)

        if not isinstance(config, dict):
            raise LoadingException(f"{self.path} must hold a JSON object")
        return config

    def order_items(self, package: dict, items: List[str]) -> List[str]:
        key_items = []
        for key in package.keys():
            if key in items:
                key_items.append(key)
        return key_items

    def unpackage(self, package: dict, items: List[str], ordering: Callable[[dict, List[str]], List[str]] = None) -> dict:
        if ordering is None:
            ordering = self.order_items
        if not items:
            raise LoadingException("invalid requirement list,using default values")

        ordered_items = ordering(package, items)
        unpackaged = {}

        for item in ordered_items:
            value = package.get(item)
            if not value or not isinstance(value, dict):
                raise LoadingException(f"{item} not found,using default values")
            unpackaged[item] = value

        return unpackaged

    def load_base(self, base):
        """Overlay the file's server/client sections on ``base``; any problem keeps ``base``."""
        try:
            package = self.load_config()
        except FileNotFoundError:
            self._warn(f"no config file found at {self.path},using default values")
            return base
        except json.JSONDecodeError:
            self._warn(f"config file {self.path} could not be loaded,using default values")
            return base
        except (OSError, UnicodeDecodeError) as e:
            self._warn(f"config file {self.path} could not be read: {str(e)},using default values")
            return base
        except LoadingException as e:
            self._warn(e.message)
            return base

        if not package:
            self._warn("config file is empty,using default values")
            return base

        try:
            sections = self.unpackage(package, list(SECTIONS))
        except LoadingException as e:
            self._warn(e.message)
            return base

        overrides = {}
        for section, values in sections.items():
            for key in SECTIONS[section]:
                if key in values:
                    overrides[key] = values[key]

        try:
            return replace(base, **self._cast(base, overrides))
        except (TypeError, ValueError) as e:
            self._warn(f"invalid value in {self.path}: {str(e)},using default values")
            return base

    @staticmethod
    def _cast(base, overrides):
        return {key: type(getattr(base, key))(value) for key, value in overrides.items()}

    def _warn(self, message):
        if self.logger is not None:
            self.logger.warning(message)
