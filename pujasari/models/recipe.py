"""
Recipe data models
"""
from typing import List, Optional
from pydantic import BaseModel, Field

class RecipeBase(BaseModel):
    nama: str = Field(..., description="Nama resep", examples=["Opor Ayam", "Sayur Sop"])
    bahan: List[str] = Field(..., description="Bahan-bahan resep", examples=[["2 Cabe Merah", "1 Lengkuas (dihaluskan)"]])
    langkah: List[str] = Field(..., description="Langkah-langkah dalam membuat resep")

class RecipeCreate(RecipeBase):
    pass

class RecipeUpdate(BaseModel):
    nama: Optional[str] = None
    bahan: Optional[List[str]] = None
    langkah: Optional[List[str]] = None

class Recipe(RecipeBase):
    id: str = Field(..., description="Id resep")
