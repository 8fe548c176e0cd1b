"""Unit tests for blake2kit.crypto.validation module."""

import pytest

from blake2kit.crypto.errors import (
    ArgumentTypeError,
    Blake2sError,
    KeyLengthError,
    MissingArgumentError,
    OutputSizeError,
    PersonalizationLengthError,
    SaltLengthError,
)
from blake2kit.crypto.validation import (
    require_argument,
    to_bytes,
    validate_key,
    validate_message,
    validate_output_size,
    validate_personalization,
    validate_salt,
)


class TestToBytes:
    """Test text and buffer normalization."""

    def test_text_is_utf8_encoded(self):
        """Test text is UTF-8 encoded."""
        assert to_bytes("héllo") == "héllo".encode("utf-8")

    def test_buffers(self):
        """Test bytes-like buffers are copied to bytes."""
        assert to_bytes(bytearray(b"ab")) == b"ab"
        assert to_bytes(memoryview(b"ab")) == b"ab"

    @pytest.mark.parametrize("value", [0, 5, 16, 1.5, [1, 2], (1, 2), object()])
    def test_non_buffers_rejected(self, value):
        """Test ints and other non-buffers are not coerced."""
        with pytest.raises(ArgumentTypeError):
            to_bytes(value)

    def test_type_error_is_builtin_type_error(self):
        """Test ArgumentTypeError can be caught as TypeError."""
        with pytest.raises(TypeError):
            to_bytes(3)


class TestValidateKey:
    """Test facade key policy."""

    def test_absent_key_becomes_empty(self):
        """Test a missing key becomes an empty key."""
        assert validate_key(None) == b""

    @pytest.mark.parametrize("length", [16, 32, 33, 64])
    def test_accepted_lengths(self, length):
        """Test keys of 16..64 bytes pass."""
        key = bytes(length)
        assert validate_key(key) == key

    @pytest.mark.parametrize("length", [0, 1, 15, 65])
    def test_rejected_lengths(self, length):
        """Test keys outside 16..64 bytes fail."""
        with pytest.raises(KeyLengthError, match="between 16 and 64"):
            validate_key(bytes(length))

    def test_text_key(self):
        """Test text keys are encoded."""
        assert validate_key("k" * 16) == b"k" * 16

    def test_int_key_rejected(self):
        """Test an int is not turned into an all-zero key."""
        with pytest.raises(ArgumentTypeError):
            validate_key(16)

    def test_error_is_value_error(self):
        """Test KeyLengthError can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_key(b"short")


class TestValidateOutputSize:
    """Test facade output size policy."""

    @pytest.mark.parametrize("size", [1, 32, 33, 64])
    def test_accepted(self, size):
        """Test sizes of 1..64 pass."""
        assert validate_output_size(size) == size

    @pytest.mark.parametrize("size", [-1, 0, 65, 128])
    def test_rejected(self, size):
        """Test sizes outside 1..64 fail."""
        with pytest.raises(OutputSizeError):
            validate_output_size(size)

    @pytest.mark.parametrize("size", [16.5, 16.0, True, False, "16", None])
    def test_non_int_rejected(self, size):
        """Test floats, bools and other non-ints fail."""
        with pytest.raises(OutputSizeError):
            validate_output_size(size)


class TestSaltAndPersonal:
    """Test 16-byte salt and personalization policy."""

    def test_salt_exact(self, salt16):
        """Test a 16-byte salt passes."""
        assert validate_salt(salt16) == salt16

    @pytest.mark.parametrize("length", [0, 8, 15, 17])
    def test_salt_wrong_length(self, length):
        """Test salts of any other length fail."""
        with pytest.raises(SaltLengthError, match="16 bytes"):
            validate_salt(bytes(length))

    def test_personal_exact(self, personal16):
        """Test a 16-byte personalization passes."""
        assert validate_personalization(personal16) == personal16

    @pytest.mark.parametrize("length", [0, 8, 15, 17])
    def test_personal_wrong_length(self, length):
        """Test personalizations of any other length fail."""
        with pytest.raises(PersonalizationLengthError, match="16 bytes"):
            validate_personalization(bytes(length))

    def test_int_salt_and_personal_rejected(self):
        """Test ints are not turned into zero-filled salt or personalization."""
        with pytest.raises(ArgumentTypeError):
            validate_salt(16)
        with pytest.raises(ArgumentTypeError):
            validate_personalization(16)

    def test_missing_salt(self):
        """Test a missing salt fails."""
        with pytest.raises(MissingArgumentError, match="salt"):
            validate_salt(None)

    def test_missing_personal(self):
        """Test a missing personalization fails."""
        with pytest.raises(MissingArgumentError, match="personal"):
            validate_personalization(None)


class TestRequiredArguments:
    """Test missing-argument guards."""

    def test_message_required(self):
        """Test a missing message fails."""
        with pytest.raises(MissingArgumentError, match="message"):
            validate_message(None)

    def test_empty_message_allowed(self):
        """Test an empty message passes."""
        assert validate_message(b"") == b""

    def test_int_message_rejected(self):
        """Test an int message is not coerced."""
        with pytest.raises(ArgumentTypeError):
            validate_message(5)

    def test_missing_argument_is_type_error(self):
        """Test MissingArgumentError can be caught as TypeError."""
        with pytest.raises(TypeError):
            require_argument(None, "thing")

    def test_errors_share_base(self):
        """Test all validation errors derive from Blake2sError."""
        for error in (KeyLengthError, OutputSizeError, SaltLengthError, MissingArgumentError, ArgumentTypeError):
            assert issubclass(error, Blake2sError)
