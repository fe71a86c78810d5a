"""FastAPI dependency providers.

Services are built once in the application lifespan and stored on
``app.state.container``; these providers hand them to endpoints.
"""

from typing import Annotated

from fastapi import (
    Depends,
    Request,
)

from translation_hub.domain.services import (
    AuthService,
    SessionService,
    TranslationHistoryService,
    UserDomainService,
)
from translation_hub.infrastructure.container import Container
from translation_hub.services.translation_provider import TranslationProviderInterface


def get_container(request: Request) -> Container:
    """Get the application container.

    Returns:
        Container: Services wired at startup
    """
    return request.app.state.container


def get_auth_service(container: Container = Depends(get_container)) -> AuthService:
    return container.auth


def get_session_service(container: Container = Depends(get_container)) -> SessionService:
    return container.sessions


def get_user_service(container: Container = Depends(get_container)) -> UserDomainService:
    return container.users


def get_translation_service(container: Container = Depends(get_container)) -> TranslationHistoryService:
    return container.translations


def get_translation_provider(container: Container = Depends(get_container)) -> TranslationProviderInterface:
    return container.provider


# Type aliases for cleaner endpoint signatures
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
UserServiceDep = Annotated[UserDomainService, Depends(get_user_service)]
TranslationServiceDep = Annotated[TranslationHistoryService, Depends(get_translation_service)]
TranslationProviderDep = Annotated[TranslationProviderInterface, Depends(get_translation_provider)]
