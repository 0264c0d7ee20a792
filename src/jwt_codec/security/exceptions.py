"""
Custom exceptions for JWT encoding and decoding.
"""


class JWTError(Exception):
    """Base exception for JWT-related errors."""
    def __init__(self, message: str, error_code: str = "JWT_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class SigningFailureError(JWTError):
    """The MAC primitive could not produce a signature."""
    def __init__(self, message: str = "Token signing failed."):
        super().__init__(message, "SIGNING_FAILURE")


class InvalidClaimsError(JWTError):
    """Claims cannot be serialized as a JSON object."""
    def __init__(self, message: str = "Claims are not JSON-serializable."):
        super().__init__(message, "INVALID_CLAIMS")


class DecodeError(JWTError):
    """Base exception for errors raised while decoding a token."""
    pass


class MalformedTokenError(DecodeError):
    """Token does not have three valid base64url segments."""
    def __init__(self, message: str = "Token is malformed."):
        super().__init__(message, "MALFORMED_TOKEN")


class MalformedHeaderError(DecodeError):
    """Token header is not a JSON object with an 'alg' field."""
    def __init__(self, message: str = "Token header is malformed."):
        super().__init__(message, "MALFORMED_HEADER")


class MalformedPayloadError(DecodeError):
    """Token payload is not a JSON object."""
    def __init__(self, message: str = "Token payload is malformed."):
        super().__init__(message, "MALFORMED_PAYLOAD")


class UnsupportedAlgorithmError(DecodeError):
    """Token declares an algorithm the caller does not accept."""
    def __init__(self, message: str = "Unsupported algorithm."):
        super().__init__(message, "UNSUPPORTED_ALGORITHM")


class SignatureMismatchError(DecodeError):
    """Token signature does not match its content."""
    def __init__(self, message: str = "Invalid token signature."):
        super().__init__(message, "SIGNATURE_MISMATCH")
