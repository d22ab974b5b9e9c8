from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.exceptions import ClassNotFound
from app.schemas.ceramic_class import ClassListing, ClassUpdate
from app.schemas.student import ClassRead
from app.services.normalizer import map_class_listing
from app.services.student import student as crud_student

router = APIRouter()


@router.get("/", response_model=List[ClassListing])
def get_classes(db: Session = Depends(get_db)):
    """
    Every class, newest first, with its month label and student
    """
    return [map_class_listing(cls) for cls in crud_student.get_classes(db)]


@router.put("/{class_id}", response_model=ClassRead)
def update_class(
    class_id: int,
    ceramic_class: ClassUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a class

    - **class_name** and **class_price** are required
    - the other fields only change when they are sent
    """
    updated = crud_student.update_class(db=db, class_id=class_id, ceramic_class=ceramic_class)
    if not updated:
        raise ClassNotFound(class_id)
    return ClassRead.model_validate(updated)


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_class(
    class_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete a single class
    """
    if not crud_student.delete_class(db=db, class_id=class_id):
        raise ClassNotFound(class_id)
    return None
