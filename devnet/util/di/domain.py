"""Domain layer DI providers."""

from dishka import Scope, provide

from devnet.config import AuthSettings, CommentSettings
from devnet.domain.repository import (
    CommentRepository,
    ResourceRepository,
    UserRepository,
)
from devnet.domain.service import (
    CommentService,
    IdentityProviderClient,
    JWTService,
    ResourceService,
    UserService,
)
from devnet.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            max_content_length=comment_settings.max_content_length,
        )

    @provide
    def get_resource_service(
        self, resource_repository: ResourceRepository
    ) -> ResourceService:
        """Provide post/project domain service."""
        return ResourceService(resource_repository=resource_repository)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        identity_client: IdentityProviderClient,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, identity_client=identity_client
        )
