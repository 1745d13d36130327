from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.database import get_db
from parcelx.crud import crypto_wallet as crud
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.crypto_wallet import (
    CryptoWalletCreate,
    CryptoWalletResponse,
    CryptoWalletUpdate,
)
from parcelx.services.auth import get_current_admin

router = APIRouter()


@router.get("/", response_model=List[CryptoWalletResponse])
def read_wallets(
    search: Optional[str] = None,
    active_only: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    """Wallets in checkout display order."""
    return crud.get_wallets(db, search=search, active_only=active_only)


@router.post("/", response_model=CryptoWalletResponse, status_code=201)
def create_wallet(
    wallet: CryptoWalletCreate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return crud.create_wallet(db, wallet=wallet)


@router.put("/{wallet_id}", response_model=CryptoWalletResponse)
def update_wallet(
    wallet_id: int,
    wallet: CryptoWalletUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_wallet = crud.update_wallet(db, wallet_id=wallet_id, wallet=wallet)
    if db_wallet is None:
        raise HTTPException(status_code=404, detail="Wallet not found")
    return db_wallet


@router.post("/{wallet_id}/toggle", response_model=CryptoWalletResponse)
def toggle_wallet(
    wallet_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_wallet = crud.toggle_wallet(db, wallet_id=wallet_id)
    if db_wallet is None:
        raise HTTPException(status_code=404, detail="Wallet not found")
    return db_wallet


@router.delete("/{wallet_id}")
def delete_wallet(
    wallet_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    success = crud.delete_wallet(db, wallet_id=wallet_id)
    if not success:
        raise HTTPException(status_code=404, detail="Wallet not found")
    return {"message": "Wallet deleted successfully"}
