from chirper.models.chirp import Chirp
from chirper.models.refresh_token import RefreshToken
from chirper.models.user import User

__all__ = [
    "Chirp",
    "RefreshToken",
    "User",
]
