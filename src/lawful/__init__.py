from .config import LawSettings
from .errors import (
    ConfigurationError,
    EmptyStructureError,
    LawfulError,
    LawViolation,
    PropertiesFailed,
)
from .properties import LawReport, Prop, Properties, PropResult, check_all, for_all

__all__ = [
    # Configuration
    "LawSettings",
    # Errors
    "LawfulError",
    "LawViolation",
    "PropertiesFailed",
    "ConfigurationError",
    "EmptyStructureError",
    # Law checking
    "Prop",
    "Properties",
    "PropResult",
    "LawReport",
    "for_all",
    "check_all",
]
