__all__ = ["application", "web", "LOGGING", "build_logging"]


from .application import AppSettings
from .web import WebSettings


application: AppSettings = AppSettings()
web: WebSettings = WebSettings()


def build_logging(settings: AppSettings) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "[%(asctime)s %(levelname)s] %(name)s | %(message)s",
            },
            "json": {
                "class": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "level": settings.log_level,
                "class": "logging.StreamHandler",
                "formatter": settings.log_format,
            },
        },
        "loggers": {
            "ping_service": {
                "handlers": ["console"],
                "level": settings.log_level,
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
            "": {
                "handlers": ["console"],
                "level": "WARNING",
            },
        },
    }


LOGGING = build_logging(application)
