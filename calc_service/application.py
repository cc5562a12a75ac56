import logging
import math
import time

from flask import Flask, request, jsonify
from pydantic import BaseModel, Field, ValidationError, field_validator

from calc_service.calculation import calc
from calc_service.defaults import Config
from calc_service.errors import ERROR_MESSAGES, ErrorKind, CalculationException
from calc_service.loggingsetup import log_calculation


BAD_REQUEST_MESSAGE = "Плохой запрос"
METHOD_NOT_ALLOWED_MESSAGE = "разрешен только метод POST"


class CalculationRequest(BaseModel):
    expression: str = Field(default="", strict=True, description="infix arithmetic expression")

    @field_validator("expression", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value


def create_app(config: Config = None, info_logger=None, calc_logger=None) -> Flask:

    config = config or Config.from_env()
    info_logger = info_logger or logging.getLogger("info")
    calc_logger = calc_logger or logging.getLogger("calculations")

    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.json.sort_keys = False
    app.config["CALC"] = config

    def calculator():
        start = time.perf_counter()

        data = request.get_json(force=True, silent=True)
        if data is None:
            log_calculation(calc_logger, None, 400, error=BAD_REQUEST_MESSAGE)
            return jsonify({"error": BAD_REQUEST_MESSAGE}), 400

        try:
            payload = CalculationRequest.model_validate(data)
        except ValidationError as e:
            log_calculation(calc_logger, None, 400, error=f"{BAD_REQUEST_MESSAGE}: {e.error_count()} validation error(s)")
            return jsonify({"error": BAD_REQUEST_MESSAGE}), 400

        expr = payload.expression
        try:
            result = calc(expr)
            if math.isinf(result) or math.isnan(result):
                raise ValueError("Invalid result")
        except CalculationException as e:
            message = ERROR_MESSAGES[e.kind]
            log_calculation(calc_logger, expr, 422, error=message, duration=time.perf_counter() - start)
            return jsonify({"error": message}), 422
        except Exception as e:
            info_logger.exception(f"unexpected failure evaluating {expr!r}: {str(e)}")
            message = ERROR_MESSAGES[ErrorKind.INTERNAL]
            log_calculation(calc_logger, expr, 500, error=message, duration=time.perf_counter() - start)
            return jsonify({"error": message}), 500

        log_calculation(calc_logger, expr, 200, result=result, duration=time.perf_counter() - start)
        return jsonify({"result": result}), 200

    app.add_url_rule("/", "calculator", calculator, methods=["POST"], provide_automatic_options=False)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "OK"}), 200

    @app.errorhandler(405)
    def method_not_allowed(e):
        if request.path == "/health":
            return jsonify({"error": "only GET is allowed"}), 405
        return jsonify({"error": METHOD_NOT_ALLOWED_MESSAGE}), 405

    return app
