"""
Account API routes: registration, login and a user's order history.
"""
from typing import List

from fastapi import APIRouter, Depends, Path

from storefront.dependencies import get_account_service
from storefront.models import LoginRequest, Order, UserCreate, UserPublic
from storefront.services import AccountService

router = APIRouter(tags=["accounts"])


@router.post("/auth/register", response_model=UserPublic, status_code=201)
async def register(
    user: UserCreate,
    accounts: AccountService = Depends(get_account_service),
) -> UserPublic:
    """Create an account. The response never includes the password."""
    return await accounts.register(user)


@router.post("/auth/login", response_model=UserPublic)
async def login(
    credentials: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
) -> UserPublic:
    """
    Check credentials and return the matching account.

    No session or token is issued.
    """
    return await accounts.authenticate(credentials.email, credentials.password)


@router.get("/users/{user_id}/orders", response_model=List[Order])
async def list_user_orders(
    user_id: int = Path(..., gt=0),
    accounts: AccountService = Depends(get_account_service),
) -> List[Order]:
    return await accounts.list_orders(user_id)
