"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    MEMBERSHIP_REQUIRED = "MEMBERSHIP_REQUIRED"
    BLOCKED = "BLOCKED"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    PHOTO_NOT_FOUND = "PHOTO_NOT_FOUND"
    MATCH_NOT_FOUND = "MATCH_NOT_FOUND"
    BLOCK_NOT_FOUND = "BLOCK_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PROFILE = "INVALID_PROFILE"
    INVALID_SWIPE = "INVALID_SWIPE"
    INVALID_MESSAGE = "INVALID_MESSAGE"
    SELF_ACTION = "SELF_ACTION"
    PHOTO_LIMIT_REACHED = "PHOTO_LIMIT_REACHED"

    # Conflict errors (409)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class ProfileNotFoundError(AppException):
    """Profile not found (or hidden from the viewer)."""

    def __init__(self, profile_id: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}" if profile_id else "Profile not found",
            status_code=404,
            details={"profile_id": profile_id} if profile_id else None,
        )


class ProfileAlreadyExistsError(AppException):
    """The user already owns a profile."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message="A profile already exists for this user",
            status_code=409,
            details={"user_id": user_id},
        )


class InvalidProfileError(AppException):
    """Profile fields are inconsistent."""

    def __init__(self, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_PROFILE,
            message=message,
            status_code=400,
        )


class PhotoNotFoundError(AppException):
    """Photo not found."""

    def __init__(self, photo_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PHOTO_NOT_FOUND,
            message=f"Photo not found: {photo_id}",
            status_code=404,
            details={"photo_id": photo_id},
        )


class PhotoLimitError(AppException):
    """Profile already holds the maximum number of photos."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            error_code=ErrorCode.PHOTO_LIMIT_REACHED,
            message=f"A profile can hold at most {limit} photos",
            status_code=400,
            details={"limit": limit},
        )


class InvalidSwipeError(AppException):
    """Swipe request is not acceptable."""

    def __init__(self, message: str = "Invalid swipe action") -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_SWIPE,
            message=message,
            status_code=400,
        )


class SelfActionError(AppException):
    """A profile tried to act on itself (swipe, block, report)."""

    def __init__(self, action: str) -> None:
        super().__init__(
            error_code=ErrorCode.SELF_ACTION,
            message=f"You cannot {action} your own profile",
            status_code=400,
            details={"action": action},
        )


class MatchNotFoundError(AppException):
    """Match not found, or the requester is not a participant."""

    def __init__(self, match_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.MATCH_NOT_FOUND,
            message=f"Match not found: {match_id}",
            status_code=404,
            details={"match_id": match_id},
        )


class InvalidMessageError(AppException):
    """Message content is empty or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_MESSAGE,
            message=message,
            status_code=400,
        )


class BlockedError(AppException):
    """Interaction refused because one party blocked the other."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.BLOCKED,
            message="This conversation is no longer available",
            status_code=403,
        )


class BlockNotFoundError(AppException):
    """Block not found."""

    def __init__(self, blocked_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.BLOCK_NOT_FOUND,
            message=f"No block exists for profile: {blocked_id}",
            status_code=404,
            details={"blocked_id": blocked_id},
        )


class MembershipRequiredError(AppException):
    """Feature requires a paid membership tier."""

    def __init__(self, required: str = "premium") -> None:
        super().__init__(
            error_code=ErrorCode.MEMBERSHIP_REQUIRED,
            message=f"This feature requires a {required} membership",
            status_code=403,
            details={"required_membership": required},
        )
