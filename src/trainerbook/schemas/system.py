from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str


class SuccessResponse(BaseModel):
    success: bool = True
