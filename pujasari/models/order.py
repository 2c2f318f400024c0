"""
Order (checkout history) data models
"""
import time
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from pujasari.core.schema import Bank, OrderStatus, PaymentMethod

def current_timestamp() -> int:
    """Current time in epoch milliseconds"""
    return int(time.time() * 1000)

class OrderItem(BaseModel):
    """Product checked out in an order"""
    item_id: str = Field(..., description="Id produk")
    amount: int = Field(..., description="Banyak item")

class OrderBase(BaseModel):
    bank: Bank = Field(..., description="Tipe bank yang dapat digunakan")
    no_vc: str = Field(..., description="Nomor Virtual Account yang dapat digunakan")
    payment_method: PaymentMethod = Field(..., description="Jenis metode pembayaran")
    status: OrderStatus = Field(OrderStatus.MENUNGGU_PEMBAYARAN, description="Status pemesanan")
    time: int = Field(default_factory=current_timestamp, description="Waktu pemesanan", examples=[1652521028791])
    user_id: str = Field(..., description="ID User pemesan")
    checkout_items: List[OrderItem] = Field(..., description="Produk-produk yang di checkout")

class OrderCreate(OrderBase):
    pass

class OrderUpdate(BaseModel):
    """Only the status of an order can change"""
    model_config = ConfigDict(extra="forbid")

    status: Optional[OrderStatus] = None

class Order(OrderBase):
    id: str = Field(..., description="Id pesanan")
