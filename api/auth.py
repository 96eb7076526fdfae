from fastapi import HTTPException, Security, status, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from config.settings import settings
from utils.database import get_db
from utils.identity_provider import (
    OwnerIdentity,
    SupabaseIdentityProvider,
    TokenTableIdentityProvider,
)

# Bearer scheme for OpenAPI/Swagger; missing headers are reported as 401 below
bearer_scheme = HTTPBearer(auto_error=False)

NOT_LOGGED_IN = "Not logged in"


def get_identity_provider(db: Session = Depends(get_db)):
    """
    Identity provider selected by AUTH_PROVIDER.

    Raises:
        HTTPException: If the Supabase provider is selected but not configured
    """
    if settings.AUTH_PROVIDER == "supabase":
        if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Identity provider is not configured",
            )
        return SupabaseIdentityProvider(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)

    return TokenTableIdentityProvider(db)


def get_current_owner(
    credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
    provider=Depends(get_identity_provider),
) -> OwnerIdentity:
    """
    Dependency resolving the Authorization: Bearer token to a form owner.

    Returns:
        OwnerIdentity: Owner id (and email when the provider knows it)

    Raises:
        HTTPException: 401 if the token is missing, unknown or inactive
    """
    if not credentials or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_LOGGED_IN,
            headers={"WWW-Authenticate": "Bearer"},
        )

    identity = provider.resolve(credentials.credentials)
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_LOGGED_IN,
            headers={"WWW-Authenticate": "Bearer"},
        )

    return identity
