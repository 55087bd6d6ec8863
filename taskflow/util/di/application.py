"""Application layer DI providers."""

from dishka import Scope, provide

from taskflow.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    OAuthLoginUseCase,
    RegisterUseCase,
)
from taskflow.application.usecase.task import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from taskflow.domain.service import (
    AccountResolutionService,
    AuthService,
    JWTService,
    PasswordService,
    TaskService,
    UserService,
)
from taskflow.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_oauth_login_use_case(
        self,
        auth_service: AuthService,
        account_resolution_service: AccountResolutionService,
        jwt_service: JWTService,
    ) -> OAuthLoginUseCase:
        """Provide OAuth login use case."""
        return OAuthLoginUseCase(
            auth_service=auth_service,
            account_resolution_service=account_resolution_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Task use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tasks_use_case(self, task_service: TaskService) -> ListTasksUseCase:
        """Provide list tasks use case."""
        return ListTasksUseCase(task_service=task_service)

    @provide(scope=Scope.REQUEST)
    def get_create_task_use_case(
        self, task_service: TaskService
    ) -> CreateTaskUseCase:
        """Provide create task use case."""
        return CreateTaskUseCase(task_service=task_service)

    @provide(scope=Scope.REQUEST)
    def get_update_task_use_case(
        self, task_service: TaskService
    ) -> UpdateTaskUseCase:
        """Provide update task use case."""
        return UpdateTaskUseCase(task_service=task_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_task_use_case(
        self, task_service: TaskService
    ) -> DeleteTaskUseCase:
        """Provide delete task use case."""
        return DeleteTaskUseCase(task_service=task_service)
