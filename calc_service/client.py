import logging

import requests

from calc_service.errors import ERROR_MESSAGES, EXCEPTIONS, ServiceException, ServiceUnavailableException

KINDS_BY_MESSAGE = {message: kind for kind, message in ERROR_MESSAGES.items()}


class CalcClient:

    def __init__(self, base_url, timeout=5, retries=1, logger=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, retries)
        self.logger = logger or logging.getLogger("info")

    @classmethod
    def from_config(cls, base_url, config, logger=None):
        return cls(base_url, timeout=config.timeout, retries=config.retries, logger=logger)

    def calculate(self, expression: str) -> float:
        res = self._post("/", {"expression": expression})

        try:
            body = res.json()
        except ValueError:
            raise ServiceException(res.status_code, f"non JSON response from {self.base_url}") from None

        if not isinstance(body, dict):
            raise ServiceException(res.status_code, f"unexpected response body from {self.base_url}")

        if res.status_code == 200 and "result" in body:
            return float(body["result"])

        message = body.get("error", "")
        if res.status_code == 422:
            kind = KINDS_BY_MESSAGE.get(message)
            if kind in EXCEPTIONS:
                raise EXCEPTIONS[kind](message)

        raise ServiceException(res.status_code, message or f"unexpected status {res.status_code}")

    def health(self) -> bool:
        try:
            response = requests.get(f"{self.base_url}/health", timeout=self.timeout)
            if response.status_code != 200:
                self.logger.warning(f"calculator at {self.base_url} unhealthy, status {response.status_code}")
            return response.status_code == 200
        except (requests.exceptions.Timeout, requests.exceptions.ConnectionError):
            self.logger.error(f"calculator at {self.base_url} not responding in time")
            return False

    def _post(self, endpoint, json_data):
        url = f"{self.base_url}{endpoint}"
        attempts = 0

        while True:
            try:
                return requests.post(url, json=json_data, timeout=self.timeout)
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                attempts += 1

                if isinstance(e, requests.exceptions.Timeout):
                    self.logger.error(f"calculator timed out at {url} after {attempts} attempts")
                else:
                    self.logger.error(f"connection aborted with calculator at {url} after {attempts} attempts")

                if attempts >= self.retries:
                    raise ServiceUnavailableException(attempts, f"calculator at {url} unreachable after {attempts} attempts") from e
