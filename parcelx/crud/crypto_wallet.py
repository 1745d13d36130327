from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.models.crypto_wallet import CryptoWallet
from parcelx.schemas.crypto_wallet import CryptoWalletCreate, CryptoWalletUpdate
from parcelx.utils.query_utils import apply_search


def get_wallet(db: Session, wallet_id: int) -> Optional[CryptoWallet]:
    return db.query(CryptoWallet).filter(CryptoWallet.id == wallet_id).first()


def get_wallets(
    db: Session, search: Optional[str] = None, active_only: bool = False
) -> List[CryptoWallet]:
    query = apply_search(
        db.query(CryptoWallet),
        search,
        [
            CryptoWallet.crypto_name,
            CryptoWallet.crypto_symbol,
            CryptoWallet.network_type,
            CryptoWallet.wallet_address,
        ],
    )
    if active_only:
        query = query.filter(CryptoWallet.is_active == True)
    return query.order_by(CryptoWallet.display_order, CryptoWallet.crypto_symbol).all()


def create_wallet(db: Session, wallet: CryptoWalletCreate) -> CryptoWallet:
    db_wallet = CryptoWallet(**wallet.model_dump(mode="json"))
    db.add(db_wallet)
    db.commit()
    db.refresh(db_wallet)
    return db_wallet


def update_wallet(
    db: Session, wallet_id: int, wallet: CryptoWalletUpdate
) -> Optional[CryptoWallet]:
    db_wallet = get_wallet(db, wallet_id)
    if not db_wallet:
        return None

    update_data = wallet.model_dump(mode="json", exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_wallet, field, value)

    db.commit()
    db.refresh(db_wallet)
    return db_wallet


def toggle_wallet(db: Session, wallet_id: int) -> Optional[CryptoWallet]:
    db_wallet = get_wallet(db, wallet_id)
    if not db_wallet:
        return None

    db_wallet.is_active = not db_wallet.is_active
    db.commit()
    db.refresh(db_wallet)
    return db_wallet


def delete_wallet(db: Session, wallet_id: int) -> bool:
    db_wallet = get_wallet(db, wallet_id)
    if not db_wallet:
        return False

    db.delete(db_wallet)
    db.commit()
    return True
