from pydantic import BaseModel, ConfigDict


class SubmissionReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    tx_hash: str
    block_number: int
    gas_used: int
    effective_gas_price: int = 0

    @property
    def gas_cost(self) -> int:
        return self.gas_used * self.effective_gas_price
