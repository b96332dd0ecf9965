from .auth import ForgotPasswordRequest, SignInRequest, SignUpRequest
from .booking import BookingCreateRequest, QuoteRequest
from .chat import ChatMessageCreate
from .common import ErrorResponse, LoginRequiredResponse, OkResponse, RedirectHint
from .preferences import DEVICE_ID_PATTERN, LanguagePreference

__all__ = [
    "BookingCreateRequest",
    "ChatMessageCreate",
    "DEVICE_ID_PATTERN",
    "ErrorResponse",
    "ForgotPasswordRequest",
    "LanguagePreference",
    "LoginRequiredResponse",
    "OkResponse",
    "QuoteRequest",
    "RedirectHint",
    "SignInRequest",
    "SignUpRequest",
]
