"""Layout validation — minimum room areas and overlap detection."""

from blueprintgen.validation.overlap import OverlapDetector, OverlapResult
from blueprintgen.validation.report import ValidationReport
from blueprintgen.validation.validator import Validator

__all__ = ["OverlapDetector", "OverlapResult", "ValidationReport", "Validator"]
