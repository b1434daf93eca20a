from pydantic import BaseModel

UNKNOWN = "unknown"


class FeeQuote(BaseModel):
    units: str
    network_fee_estimate: str
    service_fee: str
    total_fee: str
    notes: list[str] = []

    @property
    def estimable(self) -> bool:
        return self.total_fee != UNKNOWN
