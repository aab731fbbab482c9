"""Dependency injection container."""
from dependency_injector import containers, providers

from symbol_quest.repositories.card_catalog import get_catalog
from symbol_quest.repositories.card_draw_repository import CardDrawRepository
from symbol_quest.repositories.daily_usage_repository import DailyUsageRepository
from symbol_quest.repositories.user_repository import UserRepository
from symbol_quest.services.auth_service import AuthService
from symbol_quest.services.daily_draw_service import DailyDrawService
from symbol_quest.services.interpretation_service import (
    MAX_TOKENS,
    SYSTEM_PROMPT,
    TEMPERATURE,
    InterpretationService,
)
from symbol_quest.services.llm_adapter import LLMAdapter
from symbol_quest.services.server_card_selector import ServerCardSelector


class Container(containers.DeclarativeContainer):
    """
    Application dependency injection container.

    Usage:
        container = Container()
        container.config.from_dict({...})
        container.db_session.override(db.session)

        draw_service = container.daily_draw_service()
    """

    # Configuration
    config = providers.Configuration()

    # Database session - must be overridden with actual db.session
    db_session = providers.Dependency()

    # Deck dataset, loaded once
    catalog = providers.Singleton(get_catalog)

    # ==================
    # Repositories
    # ==================

    user_repository = providers.Factory(
        UserRepository,
        session=db_session
    )

    card_draw_repository = providers.Factory(
        CardDrawRepository,
        session=db_session
    )

    daily_usage_repository = providers.Factory(
        DailyUsageRepository,
        session=db_session
    )

    # ==================
    # Services
    # ==================

    server_card_selector = providers.Factory(
        ServerCardSelector,
        catalog=catalog
    )

    auth_service = providers.Factory(
        AuthService,
        user_repository=user_repository
    )

    daily_draw_service = providers.Factory(
        DailyDrawService,
        card_draw_repository=card_draw_repository,
        daily_usage_repository=daily_usage_repository,
        selector=server_card_selector,
        catalog=catalog,
        daily_limit=config.daily_draw_limit,
        history_limit=config.history_limit,
    )

    llm_adapter = providers.Factory(
        LLMAdapter,
        api_endpoint=config.llm_api_endpoint,
        api_key=config.llm_api_key,
        model=config.llm_model,
        system_prompt=SYSTEM_PROMPT,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
    )

    interpretation_service = providers.Factory(
        InterpretationService,
        llm_adapter=llm_adapter,
        catalog=catalog
    )
