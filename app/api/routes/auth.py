import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user
from app.core.config import get_settings
from app.core.security import verify_password, hash_password
from app.services.auth import build_access_token
from app.models import User, UserRole
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, ProfileOut, ProfileUpdate

router = APIRouter(tags=["auth"])
settings = get_settings()
logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email.lower()).first()
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Failed sign-in for %s", email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return user


def login_response(user: User) -> LoginResponse:
    access_token = build_access_token(
        user_id=user.id,
        role=user.role.value,
        expires_minutes=settings.access_token_expire_minutes,
    )
    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        role=user.role,
        user=ProfileOut.model_validate(user),
    )


@router.post("/auth/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)) -> LoginResponse:
    if len(request.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        )

    email = request.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    user = User(
        email=email,
        full_name=request.full_name.strip(),
        password_hash=hash_password(request.password),
        role=UserRole(request.role),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("New %s registered: %s", user.role.value, user.email)
    return login_response(user)


@router.post("/auth/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    user = authenticate(db, request.email, request.password)
    logger.info("User signed in: %s", user.email)
    return login_response(user)


@router.post("/auth/token", response_model=LoginResponse, include_in_schema=False)
def login_form(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)) -> LoginResponse:
    return login_response(authenticate(db, form.username, form.password))


@router.get("/me", response_model=ProfileOut)
def me(current_user: User = Depends(get_current_user)) -> User:
    return current_user


@router.patch("/me", response_model=ProfileOut)
def update_me(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> User:
    if payload.full_name is not None:
        current_user.full_name = payload.full_name.strip()
    if payload.class_name is not None:
        current_user.class_name = payload.class_name
    if payload.avatar_url is not None:
        current_user.avatar_url = payload.avatar_url

    db.commit()
    db.refresh(current_user)
    return current_user
