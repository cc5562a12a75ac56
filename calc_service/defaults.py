import os
from dataclasses import dataclass

from calc_service.contentsloader import ConfigLoader


class Default:
    def __init__(self):

        self.server = {
            "host": "0.0.0.0",
            "port": 8080
        }

        self.logging = {
            "log_dir": "logs",
            "log_level": "INFO"
        }

        self.client = {
            "timeout": 5,
            "retries": 1
        }

        self.files = {"config": "config.json"}

    def get_server(self):
        return self.server

    def get_logging(self):
        return self.logging

    def get_client(self):
        return self.client

    def get_files(self):
        return self.files

    def get_all(self):
        return (self.get_server(), self.get_logging(), self.get_client(), self.get_files())


def get_env_var(key, default, cast_fn):
    value = os.getenv(key)
    if not value:
        return default
    try:
        return cast_fn(value)
    except ValueError:
        return default


@dataclass
class Config:
    host: str
    port: int
    log_dir: str
    log_level: str
    timeout: float
    retries: int

    @classmethod
    def from_default(cls):
        server, logging, client, _ = Default().get_all()
        return cls(
            host=server["host"],
            port=server["port"],
            log_dir=logging["log_dir"],
            log_level=logging["log_level"],
            timeout=float(client["timeout"]),
            retries=client["retries"],
        )

    @classmethod
    def from_env(cls, base=None):
        base = base or cls.from_default()
        return cls(
            host=get_env_var("HOST", base.host, str),
            port=get_env_var("PORT", base.port, int),
            log_dir=get_env_var("LOG_DIR", base.log_dir, str),
            log_level=get_env_var("LOG_LEVEL", base.log_level, str).upper(),
            timeout=get_env_var("CLIENT_TIMEOUT", base.timeout, float),
            retries=get_env_var("CLIENT_RETRIES", base.retries, int),
        )

    @classmethod
    def from_sources(cls, path=None, logger=None):
        default = Default()
        path = path or get_env_var("CALC_CONFIG", default.get_files()["config"], str)
        base = ConfigLoader(path, logger).load_base(cls.from_default())
        return cls.from_env(base)
