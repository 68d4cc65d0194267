from src.api.auth.models import DecodedToken
from src.config.constants import UserRole

ADMIN_UID = "admin-test-uid"
CUSTOMER_UID = "customer-test-uid"


def make_decoded_token(uid: str, role: UserRole) -> DecodedToken:
    return DecodedToken(
        iss="https://securetoken.google.com/storefront-test",
        aud="storefront-test",
        auth_time=1700000000,
        user_id=uid,
        sub=uid,
        iat=1700000000,
        exp=1700003600,
        firebase={"sign_in_provider": "custom"},
        uid=uid,
        role=role,
    )
