"""Tests for the stored credential text format."""

import pytest
from pydantic import ValidationError

from credhash.core.encoding import decode_credential, encode_credential
from credhash.core.types import Algorithm, EncodedCredential
from credhash.exceptions import MalformedCredentialError


def _cred(**kw) -> EncodedCredential:
    base = dict(salt="q83vEjRWeJCrze8S", iterations=10000, key_length=30, derived_key="ZGVyaXZlZA==")
    base.update(kw)
    return EncodedCredential(**base)


class TestEncode:
    def test_legacy_layout(self):
        assert encode_credential(_cred()) == '"q83vEjRWeJCrze8S",10000,30,"ZGVyaXZlZA=="'

    def test_tagged_layout(self):
        text = encode_credential(_cred(algorithm=Algorithm.pbkdf2_sha256))
        assert text == '"pbkdf2-sha256","q83vEjRWeJCrze8S",10000,30,"ZGVyaXZlZA=="'

    def test_salt_with_json_escapes(self):
        cred = _cred(salt='a"b\\c/d')
        assert decode_credential(encode_credential(cred)) == cred


class TestDecode:
    def test_round_trip(self):
        for cred in (_cred(), _cred(iterations=1, key_length=64), _cred(algorithm="pbkdf2-sha256")):
            assert decode_credential(encode_credential(cred)) == cred

    def test_whitespace_tolerated(self):
        cred = decode_credential(' "s" , 5 , 7 , "k" ')
        assert (cred.salt, cred.iterations, cred.key_length, cred.derived_key) == ("s", 5, 7, "k")

    @pytest.mark.parametrize(
        "text",
        [
            "not,valid,json",
            "",
            '"s",1,30',
            '"s",1,30,"k",1',
            '["s",1,30,"k"]',
            '1,1,30,"k"',
            '"s","1",30,"k"',
            '"s",1.5,30,"k"',
            '"s",1e4,30,"k"',
            '"s",true,30,"k"',
            '"s",0,30,"k"',
            '"s",-5,30,"k"',
            '"s",1,0,"k"',
            '"s",1,30,null',
            '"md5","s",1,30,"k"',
            '"pbkdf2-sha1","s",1,30,"k"',
            '"s",1,30,"k"]',
        ],
    )
    def test_malformed(self, text: str):
        with pytest.raises(MalformedCredentialError):
            decode_credential(text)

    def test_non_text_input(self):
        with pytest.raises(MalformedCredentialError) as exc_info:
            decode_credential(None)  # type: ignore[arg-type]
        assert "NoneType" in exc_info.value.reason

    def test_credential_is_immutable(self):
        cred = _cred()
        with pytest.raises(ValidationError):
            cred.iterations = 1
