"""Application layer DI providers."""

from dishka import Scope, provide

from topten.application.usecase.criterion import (
    AddCriterionUseCase,
    RemoveCriterionUseCase,
)
from topten.application.usecase.identity import IssueIdentityUseCase
from topten.application.usecase.item import (
    AddItemUseCase,
    RateItemUseCase,
    RemoveItemUseCase,
)
from topten.application.usecase.list import (
    CreateListUseCase,
    GetListUseCase,
    GetUserListsUseCase,
    JoinListUseCase,
    ToggleLockUseCase,
)
from topten.domain.service import IdentityService, ListService, RankingService
from topten.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Identity use cases
    @provide
    def get_issue_identity_use_case(
        self, identity_service: IdentityService
    ) -> IssueIdentityUseCase:
        """Provide issue identity use case."""
        return IssueIdentityUseCase(identity_service=identity_service)

    # List use cases
    @provide
    def get_create_list_use_case(
        self, list_service: ListService, identity_service: IdentityService
    ) -> CreateListUseCase:
        """Provide create list use case."""
        return CreateListUseCase(
            list_service=list_service, identity_service=identity_service
        )

    @provide
    def get_join_list_use_case(
        self, list_service: ListService, identity_service: IdentityService
    ) -> JoinListUseCase:
        """Provide join list use case."""
        return JoinListUseCase(
            list_service=list_service, identity_service=identity_service
        )

    @provide
    def get_get_list_use_case(
        self, list_service: ListService, ranking_service: RankingService
    ) -> GetListUseCase:
        """Provide get list use case."""
        return GetListUseCase(
            list_service=list_service, ranking_service=ranking_service
        )

    @provide
    def get_get_user_lists_use_case(
        self, list_service: ListService
    ) -> GetUserListsUseCase:
        """Provide get user lists use case."""
        return GetUserListsUseCase(list_service=list_service)

    @provide
    def get_toggle_lock_use_case(self, list_service: ListService) -> ToggleLockUseCase:
        """Provide toggle lock use case."""
        return ToggleLockUseCase(list_service=list_service)

    # Item use cases
    @provide
    def get_add_item_use_case(self, list_service: ListService) -> AddItemUseCase:
        """Provide add item use case."""
        return AddItemUseCase(list_service=list_service)

    @provide
    def get_rate_item_use_case(self, list_service: ListService) -> RateItemUseCase:
        """Provide rate item use case."""
        return RateItemUseCase(list_service=list_service)

    @provide
    def get_remove_item_use_case(self, list_service: ListService) -> RemoveItemUseCase:
        """Provide remove item use case."""
        return RemoveItemUseCase(list_service=list_service)

    # Criterion use cases
    @provide
    def get_add_criterion_use_case(
        self, list_service: ListService
    ) -> AddCriterionUseCase:
        """Provide add criterion use case."""
        return AddCriterionUseCase(list_service=list_service)

    @provide
    def get_remove_criterion_use_case(
        self, list_service: ListService
    ) -> RemoveCriterionUseCase:
        """Provide remove criterion use case."""
        return RemoveCriterionUseCase(list_service=list_service)
