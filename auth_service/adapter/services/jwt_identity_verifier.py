from typing import Optional

from jose import JWTError, jwt

from auth_service.app.services.identity_verifier import IIdentityTokenVerifier
from auth_service.libs.result import Error, Result, Return


class JwtIdentityTokenVerifier(IIdentityTokenVerifier):
    """Verifies identity-provider JWTs with python-jose"""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.audience = audience
        self.issuer = issuer

    def verify(self, token: str) -> Result[dict]:
        """
        Verify and decode an identity token

        Returns:
            Result with the decoded claims, or INVALID_TOKEN error
        """
        options = {"verify_aud": self.audience is not None}
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options=options,
            )
        except JWTError:
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        if not claims.get("sub"):
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        return Return.ok(claims)
