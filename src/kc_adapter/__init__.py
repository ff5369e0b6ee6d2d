"""
kc_adapter – OpenID Connect client adapter for Keycloak.

Import path convention::

    from kc_adapter.adapters.keycloak import Keycloak, KeycloakExtended
    from kc_adapter.tokens import AccessToken, UserIdentity
    from kc_adapter.kernel.errors import ProviderError
    from kc_adapter.config import EnvSettingsLoader, KeycloakSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
