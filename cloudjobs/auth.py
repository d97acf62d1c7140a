from fastapi import HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .authenticator import verify_token

bearer_scheme = HTTPBearer(auto_error=False)


async def require_verification_token(credentials: HTTPAuthorizationCredentials = Security(bearer_scheme)):
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing verification token")
    if not verify_token(credentials.credentials):
        raise HTTPException(status_code=403, detail="Invalid verification token")
    return True
