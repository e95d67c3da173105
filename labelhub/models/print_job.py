"""
Pydantic models for labels and print jobs.

Wire names follow the browser client (camelCase); Python code uses the
snake_case attribute names. Both are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field


class Label(BaseModel):
    """One printable label: display text plus the identifier encoded in the QR."""

    model_config = ConfigDict(frozen=True)

    title: str
    variation: str | None = None
    condition: str | None = None
    identifier: str = Field(..., description="Payload encoded into the QR code")
    price: str


class PrintJob(BaseModel):
    """A submitted batch of labels awaiting rendering. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    labels: tuple[Label, ...]
    label_size: str = Field(..., alias="labelSize", description="Raw size key as submitted")
    show_price: bool = Field(True, alias="showPrice")
    show_condition: bool = Field(True, alias="showCondition")
    expires_at_epoch_ms: int = Field(..., alias="expires", ge=0)


class PrintLabelsRequest(BaseModel):
    """Request to create a print job."""

    model_config = ConfigDict(populate_by_name=True)

    labels: list[Label] | None = Field(None, description="Labels to print (at least one)")
    label_size: str | None = Field(None, alias="labelSize", description="small, medium, large or dymo5xl")
    show_price: bool | None = Field(None, alias="showPrice")
    show_condition: bool | None = Field(None, alias="showCondition")


class RetrievalHandle(BaseModel):
    """Where and until when a stored print job can be fetched."""

    job_id: str
    retrieval_url: str
    expires_at_epoch_ms: int


class PrintLabelsResponse(BaseModel):
    """Response for a created print job."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    job_id: str = Field(..., alias="jobId")
    print_url: str = Field(..., alias="printUrl")
    retrieval_url: str = Field(..., alias="retrievalUrl")
    expires_at: int = Field(..., alias="expiresAt", description="Expiry as epoch milliseconds")


class PrintData(BaseModel):
    """Inline print data for the direct print page (no stored job)."""

    model_config = ConfigDict(populate_by_name=True)

    labels: list[Label]
    label_size: str = Field("medium", alias="labelSize")
    show_price: bool = Field(True, alias="showPrice")
    show_condition: bool = Field(True, alias="showCondition")
