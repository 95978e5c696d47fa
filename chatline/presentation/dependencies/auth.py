"""
Authentication Dependency for FastAPI.

The bearer token is the user id handed out by POST /session. Resolving it
also binds the user to the request's logging context.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chatline.application.common.context import RequestContext
from chatline.application.queries.users import (
    ResolveIdentityHandler,
    ResolveIdentityQuery,
)
from chatline.domain.exceptions import EntityNotFoundError, UnauthenticatedError
from chatline.domain.value_objects import UserId, UserName


@dataclass
class AuthUser:
    id: UserId
    name: UserName


security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Resolve the acting user from the Authorization header.

    Raises:
        UnauthenticatedError: missing, malformed or unknown token (HTTP 401)
    """
    container = request.state.dishka_container
    handler = await container.get(ResolveIdentityHandler)
    token = credentials.credentials if credentials else None
    try:
        user = await handler.execute(ResolveIdentityQuery(token=token))
    except EntityNotFoundError as e:
        raise UnauthenticatedError("Unauthorized: unknown user") from e

    ctx = await container.get(RequestContext)
    ctx.bind_user(user.id.value)
    return AuthUser(id=user.id, name=user.name)
