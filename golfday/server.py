import logging
import os

import uvicorn

from golfday.settings import Settings, load_settings

logger = logging.getLogger(__name__)
APP_MODULE = "golfday.main:app"
DEFAULT_PORT = 8000
# uvicorn keyword -> optional env var supplying it once HTTPS is on
TLS_EXTRAS = {
    "ssl_ca_certs": "SSL_CA_FILE",
    "ssl_keyfile_password": "SSL_KEY_PASSWORD",
}


def _listen_port() -> int:
    raw = os.getenv("APP_PORT") or os.getenv("PORT")
    if raw is None:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("Port %r is not an integer, falling back to %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT


def _tls_options() -> dict[str, str]:
    cert, key = os.getenv("SSL_CERT_FILE"), os.getenv("SSL_KEY_FILE")
    if bool(cert) != bool(key):
        logger.warning("HTTPS needs both SSL_CERT_FILE and SSL_KEY_FILE; serving plain HTTP.")
    if not (cert and key):
        return {}
    options = {"ssl_certfile": cert, "ssl_keyfile": key}
    options.update({option: os.environ[env] for option, env in TLS_EXTRAS.items() if os.getenv(env)})
    return options


def uvicorn_options(settings: Settings) -> dict:
    """Keyword arguments for ``uvicorn.run`` built from the environment."""
    options = {
        "host": os.getenv("APP_HOST", "0.0.0.0"),
        "port": _listen_port(),
        "log_level": os.getenv("UVICORN_LOG_LEVEL", settings.log_level.lower()),
    }
    options.update(_tls_options())
    return options


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    options = uvicorn_options(settings)
    scheme = "https" if "ssl_certfile" in options else "http"
    logger.info("Scoring API listening on %s://%s:%d", scheme, options["host"], options["port"])
    uvicorn.run(APP_MODULE, **options)


if __name__ == "__main__":
    main()
