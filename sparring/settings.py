# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
import os

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "n2!k0n0q4b#d8c+1z3u6u_sparring_dev_key_@7w$9v^r&h5e")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get("DEBUG") in ["1", "true", "True"]

ALLOWED_HOSTS = ["*"]

# Application definition

INSTALLED_APPS = ("django.contrib.admin", "django.contrib.auth",
                  "django.contrib.contenttypes", "django.contrib.sessions",
                  "django.contrib.messages", "django.contrib.staticfiles",
                  "sparring.apps.spar", "sparring.apps.tasks",)

MIDDLEWARE = (
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
)

ROOT_URLCONF = "sparring.urls"

WSGI_APPLICATION = "sparring.wsgi.application"

DB_ENGINE = os.environ.get("SPARRING_DB_ENGINE", "django.db.backends.sqlite3")
DB_NAME = os.environ.get("SPARRING_DB_NAME",
                         os.path.join(BASE_DIR, "sparring.sqlite3"))

DATABASES = {
    "default": {
        "ENGINE":   DB_ENGINE,
        "NAME":     DB_NAME,
        "USER":     os.environ.get("SPARRING_DB_USER", ""),
        "PASSWORD": os.environ.get("SPARRING_DB_PASSWORD", ""),
        "HOST":     os.environ.get("SPARRING_DB_HOST", ""),
        "PORT":     os.environ.get("SPARRING_DB_PORT", ""),
    }
}

# Error monitoring
if os.environ.get("SENTRY_DSN"):
    sentry_sdk.init(
        dsn=os.environ["SENTRY_DSN"],
        integrations=[DjangoIntegration()],
        traces_sample_rate=1.0,
        send_default_pii=False,
        )

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = os.path.join(BASE_DIR, "staticfiles")

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.contrib.auth.context_processors.auth",
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# Draw generation

# rating given to anyone without ballot history
DEFAULT_RATING = float(os.environ.get("DEFAULT_RATING", 25.0))
# any of the openskill Weng-Lin models
RATING_MODEL = os.environ.get("RATING_MODEL", "PlackettLuce")
# seconds; unset means solve to optimality
ALLOCATION_SOLVER_TIME_LIMIT = (
    float(os.environ["ALLOCATION_SOLVER_TIME_LIMIT"])
    if os.environ.get("ALLOCATION_SOLVER_TIME_LIMIT") else None
)
ALLOCATION_SOLVER_MSG = bool(os.environ.get("ALLOCATION_SOLVER_MSG"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "sparring": {
            "handlers": ["console"],
            "level": os.environ.get("SPARRING_LOG_LEVEL", "INFO"),
        },
    },
}

if os.environ.get("SPARRING_LOG_QUERIES"):
    LOGGING["loggers"]["django.db.backends"] = {
        "handlers": ["console"],
        "level": "DEBUG",
    }
