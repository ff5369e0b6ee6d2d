"""Unit tests for unverified claim decoding and UserIdentity."""
from __future__ import annotations

import base64
import json
import time
from typing import Any

import jwt
import pytest
from hypothesis import given
from hypothesis import strategies as st

from kc_adapter.kernel.errors import DecodeError
from kc_adapter.tokens import UserIdentity, decode_claims


def _b64(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def _bearer(claims: Any) -> str:
    header = _b64(json.dumps({"alg": "none"}).encode())
    payload = _b64(json.dumps(claims).encode())
    return f"{header}.{payload}.{_b64(b'signature')}"


_json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(),
    lambda children: st.lists(children, max_size=3) | st.dictionaries(st.text(), children, max_size=3),
    max_leaves=10,
)


# ---------------------------------------------------------------------------
# decode_claims
# ---------------------------------------------------------------------------


class TestDecodeClaims:
    def test_decodes_pyjwt_token(self) -> None:
        claims = {"sub": "alice", "email": "alice@example.com", "exp": int(time.time()) + 60}
        token = jwt.encode(claims, "s3cret-key-with-enough-length-for-hs256", algorithm="HS256")
        assert decode_claims(token) == claims

    def test_signature_is_not_checked(self) -> None:
        token = jwt.encode({"sub": "alice"}, "key-a-with-enough-length-for-hs256", algorithm="HS256")
        header, payload, _ = token.split(".")
        assert decode_claims(f"{header}.{payload}.forged")["sub"] == "alice"

    def test_unknown_claims_pass_through(self) -> None:
        claims = {"sub": "u", "x-tenant": {"id": 7, "tags": ["a", "b"]}, "custom": None}
        assert decode_claims(_bearer(claims)) == claims

    def test_two_segments_is_enough(self) -> None:
        payload = _b64(json.dumps({"sub": "u"}).encode())
        assert decode_claims(f"header.{payload}") == {"sub": "u"}

    def test_unpadded_payload_lengths(self) -> None:
        for sub in ("a", "ab", "abc", "abcd"):
            assert decode_claims(_bearer({"sub": sub}))["sub"] == sub

    @pytest.mark.parametrize("bearer", ["", "single-segment"])
    def test_missing_payload_segment(self, bearer: str) -> None:
        with pytest.raises(DecodeError):
            decode_claims(bearer)

    def test_invalid_base64url(self) -> None:
        with pytest.raises(DecodeError, match="base64url"):
            decode_claims("header.***not base64***.sig")

    def test_impossible_base64_length(self) -> None:
        with pytest.raises(DecodeError):
            decode_claims("header.abcde.sig")

    def test_invalid_json(self) -> None:
        with pytest.raises(DecodeError, match="JSON"):
            decode_claims(f"header.{_b64(b'{not json')}.sig")

    def test_non_utf8_payload(self) -> None:
        with pytest.raises(DecodeError):
            decode_claims(f"header.{_b64(bytes([0xFF, 0xFE, 0xFD]))}.sig")

    def test_empty_payload_segment(self) -> None:
        with pytest.raises(DecodeError):
            decode_claims("header..sig")

    def test_json_array_payload_rejected(self) -> None:
        with pytest.raises(DecodeError, match="object"):
            decode_claims(_bearer(["sub", "u"]))

    def test_decode_error_code(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_claims("nodots")
        assert exc_info.value.code == "decode_error"
        assert exc_info.value.detail == {"segments": 1}

    @given(claims=st.dictionaries(st.text(), _json_values, max_size=6))
    def test_round_trip_arbitrary_claims(self, claims: dict[str, Any]) -> None:
        assert decode_claims(_bearer(claims)) == claims


# ---------------------------------------------------------------------------
# UserIdentity
# ---------------------------------------------------------------------------


class TestUserIdentity:
    def _identity(self, **claims: Any) -> UserIdentity:
        return UserIdentity(claims)

    def test_well_known_claims(self) -> None:
        identity = self._identity(
            sub="u-1",
            preferred_username="alice",
            email="alice@example.com",
            email_verified=True,
            name="Alice Liddell",
            given_name="Alice",
            family_name="Liddell",
        )
        assert identity.subject == "u-1"
        assert identity.preferred_username == "alice"
        assert identity.email == "alice@example.com"
        assert identity.email_verified is True
        assert identity.name == "Alice Liddell"
        assert identity.given_name == "Alice"
        assert identity.family_name == "Liddell"

    def test_absent_claims_are_none(self) -> None:
        identity = self._identity()
        assert identity.subject is None
        assert identity.email is None
        assert identity.name is None
        assert identity.realm_roles == []

    def test_realm_roles(self) -> None:
        identity = self._identity(realm_access={"roles": ["admin", 3, "user"]})
        assert identity.realm_roles == ["admin", "user"]

    def test_realm_roles_malformed(self) -> None:
        assert self._identity(realm_access="admin").realm_roles == []
        assert self._identity(realm_access={"roles": "admin"}).realm_roles == []

    def test_mapping_access(self) -> None:
        identity = self._identity(sub="u", tenant="acme")
        assert identity["tenant"] == "acme"
        assert identity.get("missing", "dflt") == "dflt"
        assert "tenant" in identity
        assert "missing" not in identity

    def test_claims_are_read_only(self) -> None:
        identity = self._identity(sub="u")
        with pytest.raises(TypeError):
            identity.claims["sub"] = "other"  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        source = {"sub": "u"}
        identity = UserIdentity(source)
        source["sub"] = "changed"
        assert identity.subject == "u"

    def test_never_marked_verified(self) -> None:
        assert self._identity(sub="u").verified is False

    def test_to_dict(self) -> None:
        assert self._identity(sub="u", x=1).to_dict() == {"sub": "u", "x": 1}
