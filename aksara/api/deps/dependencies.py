"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: aksara.configs, aksara.application, aksara.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aksara.configs import Settings
from aksara.boundary.db import get_async_db
from aksara.application.services import ChatService, ThoughtService, UserService


def get_settings_dependency(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings


def get_thought_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> ThoughtService:
    """
    Get thought service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        ThoughtService: Thought service instance
    """
    return ThoughtService(db=db, page_size=settings.store.default_page_size)


def get_user_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db, page_size=settings.store.default_page_size)


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        ChatService: Chat service instance
    """
    return ChatService(db=db, page_size=settings.store.default_page_size)
