"""
Per-call import bookkeeping.
"""

from dataclasses import dataclass, field
from typing import Optional

from structlog.types import FilteringBoundLogger

from ..criteria.models import CriterionRecord
from ..errors import DataQualityError
from ..logging.config import get_import_logger, log_recovered_issue

logger = get_import_logger(__name__)


class ImportIssues:
    """Collects the recoverable faults met while importing one criterion."""

    def __init__(self, criterion_id: Optional[str] = None,
                 log: Optional[FilteringBoundLogger] = None,
                 emit: bool = True) -> None:
        self.criterion_id = criterion_id
        self.emit = emit
        self._logger = log or logger
        self._issues: list[DataQualityError] = []

    def record(self, issue: DataQualityError) -> None:
        """Log a recovered fault, unless silenced, and keep it for the caller."""
        if self.emit:
            log_recovered_issue(self._logger, issue, {"criterion_id": self.criterion_id})
        self._issues.append(issue)

    def of_type(self, issue_type: type) -> list[DataQualityError]:
        return [issue for issue in self._issues if isinstance(issue, issue_type)]

    def __iter__(self):
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __bool__(self) -> bool:
        return bool(self._issues)


@dataclass
class CriterionImportResult:
    """Imported record together with the faults recovered while building it."""
    record: CriterionRecord
    issues: list[DataQualityError] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.issues
