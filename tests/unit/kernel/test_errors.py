from __future__ import annotations

import pytest

from resource_id.kernel.errors import (
    DecodeError,
    InvalidLength,
    InvalidResourceType,
    KernelError,
    ResourceIDError,
    UnableToDecodeUlid,
)


@pytest.mark.unit
def test_kernel_error_public_payload_includes_code_and_meta():
    err = KernelError(code="test.bad_request", message="Nope", meta={"field": "id"})
    assert err.to_public_dict() == {"detail": "Nope", "code": "test.bad_request", "meta": {"field": "id"}}


@pytest.mark.unit
def test_kernel_error_omits_empty_meta():
    assert KernelError(code="test.plain", message="Nope").to_public_dict() == {
        "detail": "Nope",
        "code": "test.plain",
    }


@pytest.mark.unit
@pytest.mark.parametrize("code", ["Bad", "bad..code", "bad-code", ".bad", ""])
def test_kernel_error_rejects_malformed_codes(code):
    with pytest.raises(ValueError):
        KernelError(code=code, message="x")


@pytest.mark.unit
def test_resource_id_errors_share_a_family():
    for err in (
        InvalidResourceType("FOO"),
        InvalidLength("USER1234"),
        UnableToDecodeUlid(DecodeError(DecodeError.INVALID_LENGTH)),
    ):
        assert isinstance(err, ResourceIDError)
        assert isinstance(err, ValueError)
        assert err.code.startswith("resource_id.")


@pytest.mark.unit
def test_undecodable_ulid_wraps_inner_reason():
    inner = DecodeError(DecodeError.INVALID_CHAR, value="x" * 26)
    err = UnableToDecodeUlid(inner)
    assert err.inner is inner
    assert err.meta == {"reason": "ulid.invalid_char"}
    assert str(err) == "Unable to decode internal Ulid: invalid character"


@pytest.mark.unit
def test_decode_error_rejects_unknown_kind():
    with pytest.raises(ValueError):
        DecodeError("bogus")
