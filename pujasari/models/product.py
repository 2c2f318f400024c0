"""
Product catalog data models
"""
from typing import Optional, Union
from pydantic import BaseModel, Field

from pujasari.core.schema import ProductCategory

class ProductBase(BaseModel):
    category: ProductCategory = Field(..., description="Kategori produk")
    deskripsi: str = Field(..., description="Deskripsi produk", examples=["Biji kapulaga merupakan..."])
    harga: Union[int, float] = Field(..., description="Harga produk", examples=[25000])
    nama: str = Field(..., description="Nama produk", examples=["Biji Kapulaga"])
    photo_name: str = Field(..., description="Nama foto produk", examples=["kapulaga_biji.jpeg"])
    promo: Union[int, float] = Field(0, description="Potongan harga/diskon (bentuk pecahan)", examples=[0.4, 0.2])

class ProductCreate(ProductBase):
    pass

class ProductUpdate(BaseModel):
    category: Optional[ProductCategory] = None
    deskripsi: Optional[str] = None
    harga: Optional[Union[int, float]] = None
    nama: Optional[str] = None
    photo_name: Optional[str] = None
    promo: Optional[Union[int, float]] = None

class Product(ProductBase):
    id: str = Field(..., description="Id produk")
