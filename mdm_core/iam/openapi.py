from django.conf import settings
from drf_spectacular.extensions import OpenApiAuthenticationExtension


class SessionTokenScheme(OpenApiAuthenticationExtension):
    """Registers the session JWT scheme once CookieOrHeaderJWTAuthentication is seen."""
    target_class = "mdm_core.iam.auth.CookieOrHeaderJWTAuthentication"
    name = "BearerOrCookieJWT"

    def get_security_definition(self, auto_schema):
        cookie = settings.SIMPLE_JWT.get("AUTH_COOKIE", "mdm_access")
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": f"Session access token, as a Bearer header or the HttpOnly `{cookie}` cookie.",
        }
