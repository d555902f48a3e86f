from binderpages.models.card import CardRecord
from binderpages.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    create_known_failure,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)
from binderpages.models.layout import (
    EMPTY_LAYOUT_MESSAGE,
    BinderLayout,
    CellClass,
    CellSize,
    GeometryResult,
    GridSize,
    LayoutConfig,
    Margins,
    PlacedCard,
)

__all__ = [
    "ApiResponse",
    "BinderLayout",
    "CardRecord",
    "CellClass",
    "CellSize",
    "EMPTY_LAYOUT_MESSAGE",
    "FailureDetail",
    "FailureKind",
    "GeometryResult",
    "GridSize",
    "KnownError",
    "LayoutConfig",
    "Margins",
    "OutcomeType",
    "PlacedCard",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "create_known_failure",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
    "is_finalized",
]
