from calc_service.application import create_app
from calc_service.defaults import Config, get_env_var, Default
from calc_service.loggingsetup import create_loggers


def main():
    _, logging_defaults, _, _ = Default().get_all()
    log_dir = get_env_var("LOG_DIR", logging_defaults["log_dir"], str)
    log_level = get_env_var("LOG_LEVEL", logging_defaults["log_level"], str)
    info_logger, calc_logger = create_loggers(log_dir, log_level)

    config = Config.from_sources(logger=info_logger)
    app = create_app(config, info_logger, calc_logger)

    print(f"Сервер запущен на порту {config.port}")
    info_logger.info(f"calculator listening on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
