"""Adapters – HTTP transport, session store and the Keycloak provider."""
