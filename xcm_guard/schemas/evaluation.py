from pydantic import BaseModel

from xcm_guard.schemas.dry_run import DryRunPreview
from xcm_guard.schemas.fees import FeeQuote
from xcm_guard.schemas.transfer import GuardResult


class TransferEvaluation(BaseModel):
    errors: list[str]
    guard: GuardResult
    fees: FeeQuote
    can_preview: bool
    dry_run: DryRunPreview | None = None
