"""
Shared value sets, reply envelopes and the response schema composer
"""
import enum
from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

PHONE_PATTERN = r"^\d{12,}$"

RESPONSE_CODES = (200, 204, 400, 404, 500)

# Enums

class Bank(str, enum.Enum):
    """Banks available for virtual account payments"""
    BNI = "BNI"
    BCA = "BCA"

class PaymentMethod(str, enum.Enum):
    VIRTUAL_ACCOUNT = "VirtualAccount"
    CASH = "Cash"

class ProductCategory(str, enum.Enum):
    DAGING = "daging"
    SAYUR = "sayur"
    BUAH = "buah"
    REMPAH = "rempah"
    PAKET = "paket"

class OrderStatus(str, enum.Enum):
    MENUNGGU_PEMBAYARAN = "Menunggu_Pembayaran"
    DIKIRIM = "Dikirim"
    SAMPAI = "Sampai"

class AdminKind(str, enum.Enum):
    EMPLOYEE = "employee"
    OWNER = "owner"

# Reply envelopes

class CreatedResponse(BaseModel):
    id: str = Field(..., description="Id of the created document")

class NotFoundResponse(BaseModel):
    statusCode: Literal[404] = 404
    error: Literal["Not Found"] = "Not Found"
    message: str

class BadRequestResponse(BaseModel):
    statusCode: Literal[400] = 400
    error: Literal["Bad Request"] = "Bad Request"
    message: str

class InternalServerErrorResponse(BaseModel):
    statusCode: Literal[500] = 500
    error: Literal["Internal Server Error"] = "Internal Server Error"
    message: str

DefaultResponse204 = {"description": "No Content"}
DefaultResponse400 = {"model": BadRequestResponse, "description": "Bad Request"}
DefaultResponse404 = {"model": NotFoundResponse, "description": "Not Found"}
DefaultResponse500 = {"model": InternalServerErrorResponse, "description": "Internal Server Error"}

def create_response_schema(responses: Dict[int, Dict[str, Any]]) -> Dict[int, Dict[str, Any]]:
    """
    Extend an endpoint's declared replies with the standard 500 reply.

    ``responses`` maps status codes to FastAPI ``responses`` entries. An explicit
    500 entry takes precedence over the default one.
    """
    for code, entry in responses.items():
        if code not in RESPONSE_CODES:
            raise ValueError(f"Unsupported response code: {code}")
        if not isinstance(entry, dict):
            raise TypeError(f"Response schema for {code} must be a dict, got {type(entry).__name__}")

    return {500: DefaultResponse500, **responses}
