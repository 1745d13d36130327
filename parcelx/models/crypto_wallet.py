from sqlalchemy import Column, Integer, String, Boolean, DateTime
from datetime import datetime

from parcelx.database import Base


class CryptoWallet(Base):
    __tablename__ = "crypto_wallets"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    crypto_name = Column(String, nullable=False)
    crypto_symbol = Column(String(10), nullable=False)
    network_type = Column(String(20), nullable=False)
    wallet_address = Column(String, nullable=False)
    icon_url = Column(String, nullable=True)
    min_confirmations = Column(Integer, default=1)
    display_order = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
