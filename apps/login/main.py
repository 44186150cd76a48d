"""HTTP entry point for the login service.

Serve with ``uvicorn apps.login.main:app`` or call :func:`run`, which loads
``config/login.yaml`` (or the given path) and applies ``max_instances`` as the
worker count.  Workers rebuild the app through :func:`build_app` from the same
file, so route, credentials and log level follow the file ``run`` was given.
"""

import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from apps.login import CredentialChecker, LoginHandler, StaticCredentialChecker
from lib.config.login_loader import DEFAULT_CONFIG_PATH, LoginConfig, load_login_config
from lib.telemetry.logger import configure_logging

ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]
CONFIG_PATH_ENV = "LOGIN_CONFIG_PATH"


def create_app(config: Optional[LoginConfig] = None, checker: Optional[CredentialChecker] = None) -> FastAPI:
    """Build the FastAPI application around a :class:`LoginHandler`."""

    config = config or LoginConfig()
    configure_logging(config.log_level)
    checker = checker or StaticCredentialChecker(config.username, config.password)
    handler = LoginHandler(checker)

    app = FastAPI()
    app.state.config = config
    app.state.login_handler = handler

    @app.api_route(config.route, methods=ROUTE_METHODS)
    async def login(request: Request) -> Response:
        """Authenticate the posted username and password."""

        payload = {}
        if request.method == "POST":
            try:
                payload = await request.json()
            except ValueError:
                payload = {}

        result = handler.handle(request.method, payload)
        if isinstance(result.body, str):
            return PlainTextResponse(result.body, status_code=result.status_code)
        return JSONResponse(result.body, status_code=result.status_code)

    return app


def build_app() -> FastAPI:
    """App factory used by uvicorn workers started from :func:`run`."""

    return create_app(load_login_config(os.environ.get(CONFIG_PATH_ENV)))


app = create_app(load_login_config())


def run(config_path: Optional[str] = None) -> None:
    import uvicorn

    config_path = config_path or DEFAULT_CONFIG_PATH
    config = load_login_config(config_path)
    configure_logging(config.log_level)
    # workers are separate processes; they find the config file through the environment
    os.environ[CONFIG_PATH_ENV] = config_path
    uvicorn.run(
        "apps.login.main:build_app",
        factory=True,
        host=config.host,
        port=config.port,
        workers=config.max_instances,
    )


if __name__ == "__main__":
    run()
