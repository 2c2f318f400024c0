"""
Customer data models
"""
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field

from pujasari.core.schema import PHONE_PATTERN

class CheckoutItem(BaseModel):
    """Item sitting in a customer's cart"""
    itemId: str = Field(..., description="Id produk yang dalam proses checkout")
    amount: int = Field(..., description="Banyak produk yang dalam proses checkout")

class CustomerBase(BaseModel):
    alamat: str = Field("", description="Alamat customer", examples=["Jl. Salak 3"])
    email: EmailStr = Field(..., description="Email customer", examples=["someone@something.com"])
    name: str = Field(..., description="Nama customer", examples=["Aji", "Budi"])
    no_hp: str = Field(..., pattern=PHONE_PATTERN, description="No handphone customer", examples=["081234562343"])
    photo_url: Optional[str] = Field(None, description="URL foto customer", examples=["https://image/photo.jpg"])

class CustomerCreate(CustomerBase):
    pass

class CustomerUpdate(BaseModel):
    alamat: Optional[str] = None
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    no_hp: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    photo_url: Optional[str] = None

class Customer(CustomerBase):
    id: str = Field(..., description="Id customer")
    current_checkout_items: List[CheckoutItem] = Field(
        default_factory=list,
        description="Item-item yang sedang dalam cart checkout customer",
    )
