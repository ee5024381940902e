"""User accessors and password hashing."""
from passlib.context import CryptContext

from notes_database.models import User

# Password hashing
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

# PUBLIC_INTERFACE
def get_user_by_id(db, user_id: str):
    return db.query(User).filter(User.id == user_id).first()

# PUBLIC_INTERFACE
def get_user_by_email(db, email: str):
    return db.query(User).filter(User.email == email.lower()).first()

# PUBLIC_INTERFACE
def create_user(db, email: str, password: str) -> User:
    """Create a user with a hashed password. Emails are stored lower-cased."""
    user = User(email=email.lower(), hashed_password=get_password_hash(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

# PUBLIC_INTERFACE
def verify_login(db, email: str, password: str):
    """Return the user for valid credentials, otherwise None."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
