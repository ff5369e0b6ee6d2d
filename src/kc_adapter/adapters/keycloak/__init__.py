"""Keycloak adapter – OpenID Connect flows and admin user management."""
from kc_adapter.adapters.keycloak import api, endpoints
from kc_adapter.adapters.keycloak.provider import Keycloak
from kc_adapter.adapters.keycloak.extended import KeycloakExtended

__all__ = ["Keycloak", "KeycloakExtended", "api", "endpoints"]
