import logging

import pytest

from calc_service.application import create_app
from calc_service.defaults import Config


@pytest.fixture
def config():
    return Config(host="127.0.0.1", port=8080, log_dir="logs", log_level="INFO", timeout=1.0, retries=2)


@pytest.fixture
def app(config):
    app = create_app(config, logging.getLogger("test.info"), logging.getLogger("test.calculations"))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
