from typing import List, Optional

from fastapi import APIRouter, status, Depends
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse

from pharmacy_locator.db import Session
from pharmacy_locator.dependencies import get_db, get_current_drugstore_id, require_current_drugstore_id
from pharmacy_locator.schemas import (
    DrugIds, DrugInDrugstore, DrugSearchByDrugstore, DrugstoreDrugs, DrugstoreProfile, DrugstoreSummary,
    UpdateDrugstoreInfo
)
from pharmacy_locator.utils import (
    add_drug_to_drugstore, get_drugstore_profile, search_by_drugs, search_by_drugs_in_drugstore,
    search_drugstores, update_drug_in_drugstore, update_drugstore_info
)

app_router = APIRouter(
    prefix='/drugstore'
)


@app_router.get("/search", status_code=status.HTTP_200_OK, response_model=List[DrugstoreSummary])
def search(name: str, db: Session = Depends(get_db)):
    return search_drugstores(db, name)


@app_router.post("/search-by-chosen-drugs", status_code=status.HTTP_200_OK, response_model=List[DrugstoreDrugs])
def search_by_chosen_drugs(drugs: DrugIds, db: Session = Depends(get_db)):
    result = search_by_drugs(db, drugs.drugs_id)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No drugstore has all of the chosen drugs."
        )
    return result


@app_router.post("/search-by-chosen-drugs-and-drugstore", status_code=status.HTTP_200_OK,
                 response_model=List[DrugstoreDrugs])
def search_by_chosen_drugs_and_drugstore(search_request: DrugSearchByDrugstore, db: Session = Depends(get_db)):
    return search_by_drugs_in_drugstore(db, search_request.drugs_id, search_request.drugstore_id)


@app_router.post("/drug/add", status_code=status.HTTP_201_CREATED)
def add_drug(drug: DrugInDrugstore, db: Session = Depends(get_db),
             drugstore_id: int = Depends(require_current_drugstore_id)):
    add_drug_to_drugstore(db, drugstore_id, drug)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content={'drug_id': drug.drug_id})


@app_router.post("/drug/update", status_code=status.HTTP_200_OK)
def update_drug(drug: DrugInDrugstore, db: Session = Depends(get_db),
                drugstore_id: int = Depends(require_current_drugstore_id)):
    update_drug_in_drugstore(db, drugstore_id, drug)
    return JSONResponse(content={'drug_id': drug.drug_id})


@app_router.get("/get-info", status_code=status.HTTP_200_OK, response_model=DrugstoreProfile)
def get_info(db: Session = Depends(get_db), current_drugstore_id: int = Depends(require_current_drugstore_id)):
    return get_drugstore_profile(db, current_drugstore_id, current_drugstore_id)


@app_router.post("/edit", status_code=status.HTTP_200_OK, response_model=DrugstoreProfile)
def edit(update: UpdateDrugstoreInfo, db: Session = Depends(get_db),
         current_drugstore_id: int = Depends(require_current_drugstore_id)):
    return update_drugstore_info(db, current_drugstore_id, update)


@app_router.get("/{drugstore_id}", status_code=status.HTTP_200_OK, response_model=DrugstoreProfile)
def get_drugstore(drugstore_id: int, db: Session = Depends(get_db),
                  current_drugstore_id: Optional[int] = Depends(get_current_drugstore_id)):
    return get_drugstore_profile(db, drugstore_id, current_drugstore_id)
