"""
Identity Context Resolver

Builds the request-scoped identity descriptor of the caller from the decoded
JWT claim set and the browser locale.
"""

from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel

DEFAULT_LOCALE = "en-US"
SUPPORTED_LOCALES = ("en-US", "da-DK", "nl-NL")


class UserInfo(BaseModel):
    """
    Details about the caller of the current request.

    Unauthenticated callers only carry is_authenticated=False and a locale;
    every profile field stays None.
    """

    is_authenticated: bool = False
    locale: Optional[str] = None
    user_id: Optional[str] = None
    tenant_id: Optional[str] = None
    user_role: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def system(cls, default_locale: str = DEFAULT_LOCALE) -> "UserInfo":
        """Identity used for background work where no user is authenticated"""
        return cls(is_authenticated=False, locale=default_locale)

    @classmethod
    def create(
        cls,
        claims: Optional[Dict[str, Any]],
        browser_locale: Optional[str] = None,
        supported_locales: Sequence[str] = SUPPORTED_LOCALES,
        default_locale: str = DEFAULT_LOCALE,
    ) -> "UserInfo":
        """
        Resolve identity from a claim set.

        Args:
            claims: Decoded JWT payload, or None when the request carries no valid token
            browser_locale: Preferred locale sent by the browser
            supported_locales: Locales the application is translated into
            default_locale: Locale used when nothing else matches

        Returns:
            UserInfo for the caller
        """
        if not claims:
            return cls(
                is_authenticated=False,
                locale=resolve_locale(browser_locale, supported_locales, default_locale),
            )

        return cls(
            is_authenticated=True,
            user_id=claims.get("user_id"),
            tenant_id=claims.get("tenant_id"),
            user_role=claims.get("role"),
            email=claims.get("email"),
            first_name=claims.get("first_name"),
            last_name=claims.get("last_name"),
            title=claims.get("title"),
            avatar_url=claims.get("avatar_url"),
            locale=resolve_locale(claims.get("locale"), supported_locales, default_locale),
        )


def resolve_locale(
    locale: Optional[str],
    supported_locales: Sequence[str] = SUPPORTED_LOCALES,
    default_locale: str = DEFAULT_LOCALE,
) -> str:
    """
    Negotiate a locale against the supported list.

    An exact match (case-insensitive) wins. Otherwise the first supported locale
    sharing the base language is used, e.g. `en-UK` resolves to `en-US`.
    Anything else falls back to the default.
    """
    if not locale:
        return default_locale

    for supported in supported_locales:
        if supported.lower() == locale.lower():
            return supported

    base_language = locale[:2].lower()
    for supported in supported_locales:
        if supported.lower().startswith(base_language):
            return supported

    return default_locale


def parse_accept_language(header: Optional[str]) -> Optional[str]:
    """Return the first language tag of an Accept-Language header"""
    if not header:
        return None
    first = header.split(",")[0].split(";")[0].strip()
    return first or None
