from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from parcelx.enums.network_type import NetworkType


class CryptoWalletBase(BaseModel):
    crypto_name: str = Field(..., min_length=1)
    crypto_symbol: str = Field(..., min_length=1, max_length=10)
    network_type: NetworkType
    wallet_address: str = Field(..., min_length=1)
    icon_url: Optional[str] = None
    min_confirmations: int = Field(1, ge=1)
    display_order: int = 0
    is_active: bool = True

    @field_validator("crypto_symbol")
    @classmethod
    def upper_symbol(cls, value):
        return value.upper()


class CryptoWalletCreate(CryptoWalletBase):
    pass


class CryptoWalletUpdate(BaseModel):
    crypto_name: Optional[str] = None
    crypto_symbol: Optional[str] = Field(None, max_length=10)
    network_type: Optional[NetworkType] = None
    wallet_address: Optional[str] = None
    icon_url: Optional[str] = None
    min_confirmations: Optional[int] = Field(None, ge=1)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("crypto_symbol")
    @classmethod
    def upper_symbol(cls, value):
        return value.upper() if value else value


class CryptoWalletResponse(CryptoWalletBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
