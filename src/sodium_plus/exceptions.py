"""Exception hierarchy for the cryptographic facade."""

from __future__ import annotations


class SodiumError(Exception):
    """
    Base exception for all errors raised by the facade and its backends.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidArgument(SodiumError, ValueError):
    """
    Raised when a caller supplies malformed input.

    Always raised before the primitive library is invoked.
    Inputs are never silently corrected.
    """


class InvalidKeyLength(InvalidArgument):
    """
    Raised when key material has the wrong length for its key type.

    Attributes:
        type_name: The key type that rejected the material.
        expected: The required length in bytes.
        actual: The length that was supplied.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual

        super().__init__(f"{type_name} must be {expected} bytes long, got {actual}")


class InvalidState(SodiumError):
    """
    Raised when a stateful handle is used out of order.

    Examples: updating a hash state after it was finalized, pushing on a
    pull-side stream, or two callers sharing one stream state at once.

    Attributes:
        state: Name of the state the handle was in.
        operation: The operation that was attempted.
    """

    def __init__(self, state: str, operation: str, *, detail: str | None = None) -> None:
        self.state = state
        self.operation = operation

        msg = f"Cannot {operation} in state {state}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class AuthenticationFailed(SodiumError):
    """Base class for cryptographic verification failures."""


class DecryptionFailed(AuthenticationFailed):
    """
    Raised when an authenticated ciphertext does not verify.

    Causes are deliberately not distinguished: tampered ciphertext, wrong key,
    wrong nonce, wrong associated data, or an out-of-order stream chunk.
    """


class SignatureInvalid(AuthenticationFailed):
    """Raised when a signed message fails verification."""


class FramingError(SodiumError, ValueError):
    """Base class for structurally malformed framed values."""


class InvalidHeaderLength(FramingError):
    """
    Raised when a secretstream header has the wrong length.

    Attributes:
        expected: The required header length.
        actual: The length that was supplied.
    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual

        super().__init__(f"Header must be {expected} bytes long, got {actual}")


class InvalidCiphertextSize(FramingError):
    """
    Raised when a ciphertext is shorter than its fixed overhead.

    Attributes:
        minimum: The smallest acceptable ciphertext length.
        actual: The length that was supplied.
    """

    def __init__(self, *, minimum: int, actual: int) -> None:
        self.minimum = minimum
        self.actual = actual

        super().__init__(f"Invalid ciphertext size: need at least {minimum} bytes, got {actual}")


class InvalidPadding(FramingError):
    """Raised when ISO/IEC 7816-4 padding cannot be removed."""


class BackendUnavailable(SodiumError, RuntimeError):
    """
    Raised when the selected primitive provider cannot be initialized.

    Attributes:
        backend_name: Name of the backend that failed to load.
    """

    def __init__(self, backend_name: str, detail: str) -> None:
        self.backend_name = backend_name
        self.detail = detail

        super().__init__(f"Backend {backend_name!r} is unavailable: {detail}")
