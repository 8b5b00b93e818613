"""Store-scoped storefront URL building."""

from collections.abc import Mapping
from urllib.parse import urlencode

from src.login_as_customer.models import Store


class UrlBuilder:
    """Builds absolute storefront URLs under a store view's base URL."""

    def get_url(
        self,
        store: Store,
        route: str,
        query: Mapping[str, str | int | bool] | None = None,
    ) -> str:
        """Build ``<base_url>/<route>?<query>``.

        Boolean query values are rendered as ``1``/``0``.
        """
        if not store.base_url:
            raise ValueError(f"Store {store.code!r} has no base URL configured")

        url = f"{store.base_url.rstrip('/')}/{route.strip('/')}"
        if query:
            params = {
                key: int(value) if isinstance(value, bool) else value
                for key, value in query.items()
            }
            url = f"{url}?{urlencode(params)}"
        return url
