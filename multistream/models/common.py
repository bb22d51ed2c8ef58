from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    message: str
    code: int


class HealthResponse(BaseModel):
    status: str


class ServiceDescriptor(BaseModel):
    name: str
    version: str
    endpoints: list[str]
