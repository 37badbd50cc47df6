# app/api/v1/auth.py

from fastapi import APIRouter, HTTPException, Depends, status
from app.schemas.user import UserCreate, UserLogin, TokenResponse
from app.services.user_service import UserService
from app.core.auth import create_access_token
from app.core.dependencies import get_user_service

router = APIRouter()


# email registration
@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create an account and return an access token.",
)
async def register(user_data: UserCreate, user_service: UserService = Depends(get_user_service)):
    user = await user_service.create_user(user_data)
    access_token = create_access_token(data={"sub": str(user.user_id)})

    return TokenResponse(access_token=access_token, user=user)


# email login
@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login",
    description="Log in with email and password.",
)
async def login(login_data: UserLogin, user_service: UserService = Depends(get_user_service)):
    user = await user_service.authenticate(email=login_data.email, password=login_data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password"
        )

    access_token = create_access_token(data={"sub": str(user.user_id)})

    return TokenResponse(access_token=access_token, user=user)
