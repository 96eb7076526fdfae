from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint"""
    error: str = Field(..., description="Human-readable error message")

    class Config:
        json_schema_extra = {
            "example": {"error": "Form not found"}
        }


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    403: {"model": ErrorResponse, "description": "Forbidden"},
    404: {"model": ErrorResponse, "description": "Not found"},
    500: {"model": ErrorResponse, "description": "Server or AI failure"},
}
