from http import HTTPStatus
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter

security = HTTPBasic()


def get_logger() -> LoggerPort:
    return StdLoggerAdapter(__name__)


def get_movie_service(request: Request) -> MovieServicePort:
    return request.app.state.movie_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def require_basic_auth(
    credentials: Annotated[HTTPBasicCredentials, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> str:
    if not auth_service.verify_credentials(credentials.username, credentials.password):
        logger.warning("Rejected credentials for user %r", credentials.username)
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
