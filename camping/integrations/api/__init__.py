from .client import ApiConfig
from .client import ApiError
from .client import CampingApiClient
from .client import VerificationKind
from .client import VerificationResult
from .client import get_api_client_from_settings

__all__ = [
    "ApiConfig",
    "ApiError",
    "CampingApiClient",
    "VerificationKind",
    "VerificationResult",
    "get_api_client_from_settings",
]
