"""
Admin data models
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from pujasari.core.schema import AdminKind, PHONE_PATTERN

class AdminBase(BaseModel):
    alamat: str = Field("", description="Alamat admin", examples=["Jl. Kenangan 2"])
    email: EmailStr = Field(..., description="Email admin", examples=["someone@something.com"])
    name: str = Field(..., description="Nama admin", examples=["Aji", "Budi"])
    no_hp: str = Field(..., pattern=PHONE_PATTERN, description="No handphone admin", examples=["081234562343"])
    admin_kind: AdminKind = Field(AdminKind.EMPLOYEE, description="Jenis admin (employee, owner)")

class AdminCreate(AdminBase):
    pass

class AdminUpdate(BaseModel):
    """Email and admin kind are fixed once the admin exists"""
    alamat: Optional[str] = None
    name: Optional[str] = None
    no_hp: Optional[str] = Field(None, pattern=PHONE_PATTERN)

class Admin(AdminBase):
    id: str = Field(..., description="Id admin")
