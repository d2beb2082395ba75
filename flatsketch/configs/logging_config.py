""" Logging presets per runtime environment """

from flatsketch.configs.environment import EnvironmentSettings
from flatsketch.configs.logging import setup_logging


def setup_development_logging(env: EnvironmentSettings) -> None:
    """Настройка логирования для разработки."""
    setup_logging(
        log_level="DEBUG",
        log_file=env.LOG_FILE and "logs/dev.log",
        rotation="1 day",
        retention="3 days",
    )


def setup_production_logging(env: EnvironmentSettings) -> None:
    """Настройка логирования для продакшена."""
    setup_logging(
        log_level=env.LOG_LEVEL,
        log_file=env.LOG_FILE,
        rotation="100 MB",
        retention="30 days",
    )


def setup_testing_logging() -> None:
    """Настройка логирования для тестов."""
    setup_logging(
        log_level="WARNING",
        log_file=None,  # Только консоль
    )


def setup_logging_for(runtime_env: str | None, env: EnvironmentSettings) -> None:
    """
    Выбирает пресет по значению ENV (dev / test / всё остальное: prod).
    """
    runtime_env = (runtime_env or "").lower()
    if runtime_env in {"dev", "development", "local"}:
        setup_development_logging(env)
    elif runtime_env in {"test", "testing"}:
        setup_testing_logging()
    else:
        setup_production_logging(env)
