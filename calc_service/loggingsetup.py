import logging
import json
import os


def create_loggers(dir, level="INFO"):

    os.makedirs(dir, exist_ok=True)
    level = logging.getLevelName(str(level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    info_logger = logging.getLogger("info")
    info_handler = logging.FileHandler(f"{dir}/info.log", encoding="utf-8")
    info_logger.setLevel(level)
    info_handler.setFormatter(logging.Formatter("%(asctime)s [calc] %(message)s"))
    if not info_logger.handlers:
        info_logger.addHandler(info_handler)
    else:
        info_handler.close()

    calc_logger = logging.getLogger("calculations")
    calc_handler = logging.FileHandler(f"{dir}/calculations.log", encoding="utf-8")
    calc_logger.setLevel(level)
    if not calc_logger.handlers:
        calc_logger.addHandler(calc_handler)
    else:
        calc_handler.close()

    return info_logger, calc_logger


def log_calculation(logger, expression, status, result=None, error=None, duration=None):

    log_data = {
        "expression": expression,
        "status": status,
        "result": result,
        "error": error,
        "duration": duration
    }

    log_message = json.dumps(log_data, indent=2, ensure_ascii=False)

    if status < 400:
        logger.info(log_message)
    elif status < 500:
        logger.warning(log_message)
    else:
        logger.error(log_message)
