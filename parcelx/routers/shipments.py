from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from parcelx.database import get_db
from parcelx.crud import shipment as crud
from parcelx.enums.shipment_options import ShipmentStatus
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.shipment import (
    ImageUploadResponse,
    ShipmentCreate,
    ShipmentImageResponse,
    ShipmentListResponse,
    ShipmentResponse,
    ShipmentStatusUpdate,
    ShipmentUpdate,
    TrackingUpdateCreate,
    TrackingUpdateResponse,
)
from parcelx.services import shipment_images
from parcelx.services.auth import get_current_admin
from parcelx.services.storage import StorageClient, get_storage
from parcelx.utils.query_utils import DEFAULT_PAGE_SIZE, page_meta

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_shipment_or_404(db: Session, shipment_id: int):
    db_shipment = crud.get_shipment(db, shipment_id=shipment_id)
    if db_shipment is None:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return db_shipment


@router.get("/", response_model=ShipmentListResponse)
def read_shipments(
    search: Optional[str] = None,
    status: Optional[ShipmentStatus] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    items, total = crud.get_shipments(
        db, search=search, status=status, page=page, page_size=page_size
    )
    return {"items": items, "total": total, **page_meta(page, page_size)}


@router.get("/{shipment_id}", response_model=ShipmentResponse)
def read_shipment(
    shipment_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _get_shipment_or_404(db, shipment_id)


@router.post("/", response_model=ShipmentResponse, status_code=201)
def create_shipment(
    shipment: ShipmentCreate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    if shipment.tracking_number and crud.get_shipment_by_tracking_number(
        db, shipment.tracking_number
    ):
        raise HTTPException(status_code=400, detail="Tracking number already exists")

    db_shipment = crud.create_shipment(db, shipment=shipment)
    logger.info(f"Shipment {db_shipment.tracking_number} created by {current_admin.email}")
    return db_shipment


@router.put("/{shipment_id}", response_model=ShipmentResponse)
def update_shipment(
    shipment_id: int,
    shipment: ShipmentUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_shipment = crud.update_shipment(db, shipment_id=shipment_id, shipment=shipment)
    if db_shipment is None:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return db_shipment


@router.patch("/{shipment_id}/status", response_model=ShipmentResponse)
def update_shipment_status(
    shipment_id: int,
    update: ShipmentStatusUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_shipment = crud.update_shipment_status(
        db, shipment_id=shipment_id, status=update.status
    )
    if db_shipment is None:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return db_shipment


@router.delete("/{shipment_id}")
def delete_shipment(
    shipment_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    success = crud.delete_shipment(db, shipment_id=shipment_id)
    if not success:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return {"message": "Shipment deleted successfully"}


@router.get("/{shipment_id}/tracking-updates", response_model=List[TrackingUpdateResponse])
def read_tracking_updates(
    shipment_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    _get_shipment_or_404(db, shipment_id)
    return crud.get_tracking_updates(db, shipment_id=shipment_id)


@router.post(
    "/{shipment_id}/tracking-updates",
    response_model=TrackingUpdateResponse,
    status_code=201,
)
def add_tracking_update(
    shipment_id: int,
    update: TrackingUpdateCreate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    _get_shipment_or_404(db, shipment_id)
    return crud.add_tracking_update(db, shipment_id=shipment_id, update=update)


@router.get("/{shipment_id}/images", response_model=List[ShipmentImageResponse])
def read_shipment_images(
    shipment_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    _get_shipment_or_404(db, shipment_id)
    return crud.get_shipment_images(db, shipment_id=shipment_id)


@router.post("/{shipment_id}/images", response_model=ImageUploadResponse, status_code=201)
def upload_shipment_images(
    shipment_id: int,
    files: List[UploadFile] = File(...),
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    _get_shipment_or_404(db, shipment_id)
    if not files:
        raise HTTPException(status_code=400, detail="No files provided")

    items = [(f.filename, f.file.read(), f.content_type) for f in files]
    try:
        images = shipment_images.upload_shipment_images(db, storage, shipment_id, items)
    except shipment_images.ImageUploadError as e:
        raise HTTPException(
            status_code=502,
            detail={
                "message": e.message,
                "uploaded": len(e.uploaded),
                "total": e.total,
            },
        )
    return {"uploaded": len(images), "total": len(items), "images": images}


@router.delete("/{shipment_id}/images/{image_id}")
def delete_shipment_image(
    shipment_id: int,
    image_id: int,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    image = crud.get_shipment_image(db, shipment_id=shipment_id, image_id=image_id)
    if image is None:
        raise HTTPException(status_code=404, detail="Image not found")
    shipment_images.delete_shipment_image(db, storage, image)
    return {"message": "Image deleted successfully"}
