"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from supersync.config import get_settings
from supersync.exceptions import DuplicateError, InvalidCredentialsError, NotFoundError
from supersync.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds
)

# Compared against when the email is unknown
DUMMY_PASSWORD_HASH = pwd_context.hash("supersync-dummy-password")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def register_user(
    db: Session, email: str, password: str, name: str, company: str | None = None
) -> User:
    """Create a new user. Raises DuplicateError if the email is taken."""
    email = email.strip().lower()
    if get_user_by_email(db, email):
        raise DuplicateError("User already exists")

    hashed_password = get_password_hash(password)
    user = User(
        email=email,
        password_hash=hashed_password,
        name=name.strip(),
        company=(company or "").strip(),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        logger.warning(f"Duplicate registration race for {email}")
        raise DuplicateError("User already exists") from None
    db.refresh(user)
    logger.info(f"Registered user {user.id} ({email})")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Check credentials and stamp last_login.

    Unknown email and wrong password raise the same error.
    """
    user = get_user_by_email(db, email)
    if not user:
        # Unknown emails still pay for one bcrypt check
        verify_password(password, DUMMY_PASSWORD_HASH)
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()

    user.last_login = datetime.now(UTC)
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.id} logged in")
    return user


def get_profile(db: Session, user_id: int) -> User:
    """Get a user's profile or raise NotFoundError."""
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def update_profile(
    db: Session, user_id: int, name: str | None = None, company: str | None = None
) -> User:
    """Apply a partial profile update. None means leave unchanged."""
    user = get_profile(db, user_id)
    if name is not None:
        user.name = name.strip()
    if company is not None:
        user.company = company.strip()
    db.commit()
    db.refresh(user)
    return user
