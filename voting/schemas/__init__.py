from voting.schemas.health import HealthResponse, LegacyHealthResponse
from voting.schemas.results import ErrorResponse, OptionResult, ResultsResponse

__all__ = [
    "HealthResponse",
    "LegacyHealthResponse",
    "OptionResult",
    "ResultsResponse",
    "ErrorResponse",
]
