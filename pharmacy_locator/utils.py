import logging
from collections import OrderedDict

from fastapi import HTTPException, status
from sqlalchemy import func, or_

from pharmacy_locator.constants import IMAGES_BASE_URL, PHOTO_SMALL
from pharmacy_locator.db import Session
from pharmacy_locator.exceptions import ScheduleDataError
from pharmacy_locator.models import City, Drug, Drugstore, DrugstoreDrug, DrugstoreWorkDay
from pharmacy_locator.schedule import (
    ScheduleGroup, assemble_schedule, assemble_schedules, index_of, parse_time
)
from pharmacy_locator.schemas import (
    DrugInDrugstore, DrugInfo, DrugstoreDrugs, DrugstoreProfile, DrugstoreSummary, UpdateDrugstoreInfo
)


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def group_work_days(work_days: list) -> list:
    """Group work day rows sharing the same opening and closing time."""
    groups = OrderedDict()
    for work_day in work_days:
        key = (work_day.time_start, work_day.time_end)
        groups.setdefault(key, []).append(work_day.work_day)

    return [
        ScheduleGroup(weekdays=weekdays, open_time=time_start, close_time=time_end)
        for (time_start, time_end), weekdays in groups.items()
    ]


def get_schedule_groups(db: Session, drugstore_id: int) -> list:
    """Fetch the schedule groups of a single drugstore."""
    work_days = db.query(DrugstoreWorkDay).filter(
        DrugstoreWorkDay.drugstore_id == drugstore_id
    ).order_by(DrugstoreWorkDay.id).all()

    return group_work_days(work_days)


def get_schedule_groups_for(db: Session, drugstore_ids: list) -> dict:
    """Fetch schedule groups for several drugstores in a single query."""
    work_days_by_drugstore = {drugstore_id: [] for drugstore_id in drugstore_ids}
    if not drugstore_ids:
        return work_days_by_drugstore

    work_days = db.query(DrugstoreWorkDay).filter(
        DrugstoreWorkDay.drugstore_id.in_(drugstore_ids)
    ).order_by(DrugstoreWorkDay.id).all()
    for work_day in work_days:
        work_days_by_drugstore[work_day.drugstore_id].append(work_day)

    return {
        drugstore_id: group_work_days(rows)
        for drugstore_id, rows in work_days_by_drugstore.items()
    }


def get_photo_url(photo_path, size: str):
    if photo_path is None:
        return None
    return f"{IMAGES_BASE_URL}/{photo_path}/{photo_path}_{size}"


def get_drugstore_profile(db: Session, drugstore_id: int, current_drugstore_id=None) -> DrugstoreProfile:
    """Profile of a drugstore with its compressed work schedule."""
    row = db.query(Drugstore, City.name).outerjoin(
        City, City.id == Drugstore.city_id
    ).filter(Drugstore.drugstore_id == drugstore_id).first()
    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Drugstore not found."
        )
    drugstore, city_name = row

    try:
        schedule = assemble_schedule(get_schedule_groups(db, drugstore_id))
    except ScheduleDataError as e:
        logger.error(f"Invalid work schedule for drugstore {drugstore_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Data integrity error in work schedule of drugstore {drugstore_id}."
        )

    return DrugstoreProfile(
        drugstore_id=drugstore.drugstore_id,
        name=drugstore.drugstore_name,
        address=drugstore.address,
        latitude=drugstore.latitude,
        longitude=drugstore.longitude,
        phone_number=drugstore.phone_number,
        city=city_name,
        email=drugstore.email,
        photo_url=get_photo_url(drugstore.drugstore_photo_path, PHOTO_SMALL),
        is_owner=current_drugstore_id == drugstore_id,
        work_schedule=schedule.work_schedule,
        closed_days=schedule.closed_days
    )


def build_work_days(drugstore_id: int, work_days: list) -> list:
    """Validate requested work days and turn them into rows, one per weekday."""
    rows = []
    seen = set()
    for work_day in work_days:
        weekday = work_day.work_day.strip().upper()
        try:
            index_of(weekday)
            time_start = parse_time(work_day.time_start)
            time_end = parse_time(work_day.time_end)
        except ScheduleDataError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message
            )
        if weekday in seen:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Weekday {weekday} is listed more than once."
            )
        seen.add(weekday)

        rows.append(DrugstoreWorkDay(
            drugstore_id=drugstore_id,
            work_day=weekday,
            time_start=time_start.replace(tzinfo=None),
            time_end=time_end.replace(tzinfo=None)
        ))

    return rows


def update_drugstore_info(db: Session, drugstore_id: int, update: UpdateDrugstoreInfo) -> DrugstoreProfile:
    """Update a drugstore's details and replace its whole work schedule."""
    drugstore = db.query(Drugstore).filter(Drugstore.drugstore_id == drugstore_id).first()
    if not drugstore:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Drugstore not found."
        )

    work_days = build_work_days(drugstore_id, update.work_days)

    drugstore.drugstore_name = update.drugstore_name
    drugstore.address = update.address
    drugstore.city_id = update.city_id
    drugstore.latitude = update.latitude
    drugstore.longitude = update.longitude
    drugstore.phone_number = update.phone_number

    db.query(DrugstoreWorkDay).filter(DrugstoreWorkDay.drugstore_id == drugstore_id).delete()
    db.add_all(work_days)
    db.commit()

    logger.info(f"Drugstore {drugstore_id} updated with {len(work_days)} work days")
    return get_drugstore_profile(db, drugstore_id, drugstore_id)


def split_search_terms(name: str) -> list:
    return name.replace(',', ' ').split()


def summarize_drugstores(db: Session, drugstores: list) -> list:
    """Attach schedules to drugstores, leaving out those with broken schedule data."""
    schedules = assemble_schedules(
        get_schedule_groups_for(db, [drugstore.drugstore_id for drugstore in drugstores])
    )

    summaries = []
    for drugstore in drugstores:
        schedule = schedules.get(drugstore.drugstore_id)
        if schedule is None:
            continue
        summaries.append(DrugstoreSummary(
            drugstore_id=drugstore.drugstore_id,
            name=drugstore.drugstore_name,
            address=drugstore.address,
            latitude=drugstore.latitude,
            longitude=drugstore.longitude,
            phone_number=drugstore.phone_number,
            work_schedule=schedule.work_schedule,
            closed_days=schedule.closed_days
        ))

    return summaries


def search_drugstores(db: Session, name: str) -> list:
    """Drugstores whose name or address contains any of the search terms."""
    terms = split_search_terms(name)
    if not terms:
        return []

    conditions = []
    for term in terms:
        pattern = f"%{term.lower()}%"
        conditions.append(func.lower(Drugstore.drugstore_name).like(pattern))
        conditions.append(func.lower(Drugstore.address).like(pattern))

    drugstores = db.query(Drugstore).filter(or_(*conditions)).order_by(Drugstore.drugstore_id).all()

    return summarize_drugstores(db, drugstores)


def get_drugs_in_drugstore(db: Session, drug_ids: list, drugstore_id: int) -> list:
    rows = db.query(Drug, DrugstoreDrug).join(
        DrugstoreDrug, DrugstoreDrug.drug_id == Drug.id
    ).filter(
        DrugstoreDrug.drugstore_id == drugstore_id,
        DrugstoreDrug.drug_id.in_(drug_ids)
    ).order_by(Drug.id).all()

    return [
        DrugInfo(
            id=drug.id,
            name=drug.name,
            description=drug.description,
            price=drugstore_drug.price,
            existence=drugstore_drug.existence,
            country_name=drug.country
        )
        for drug, drugstore_drug in rows
    ]


def attach_drugs(db: Session, drugstores: list, drug_ids: list) -> list:
    return [
        DrugstoreDrugs(**summary.model_dump(), drugs=get_drugs_in_drugstore(db, drug_ids, summary.drugstore_id))
        for summary in summarize_drugstores(db, drugstores)
    ]


def search_by_drugs(db: Session, drug_ids: list) -> list:
    """Drugstores stocking every requested drug, cheapest total first."""
    # HAVING count(*) = len(drug_ids) needs distinct ids
    drug_ids = list(dict.fromkeys(drug_ids))
    drugstores = db.query(Drugstore).join(
        DrugstoreDrug, DrugstoreDrug.drugstore_id == Drugstore.drugstore_id
    ).filter(
        DrugstoreDrug.drug_id.in_(drug_ids)
    ).group_by(Drugstore.drugstore_id).having(
        func.count(DrugstoreDrug.id) == len(drug_ids)
    ).order_by(func.sum(DrugstoreDrug.price), Drugstore.drugstore_id).all()

    return attach_drugs(db, drugstores, drug_ids)


def search_by_drugs_in_drugstore(db: Session, drug_ids: list, drugstore_id: int) -> list:
    """The given drugstore, if it stocks any of the requested drugs."""
    drugstores = db.query(Drugstore).join(
        DrugstoreDrug, DrugstoreDrug.drugstore_id == Drugstore.drugstore_id
    ).filter(
        DrugstoreDrug.drug_id.in_(drug_ids),
        Drugstore.drugstore_id == drugstore_id
    ).group_by(Drugstore.drugstore_id).all()

    return attach_drugs(db, drugstores, drug_ids)


def get_drugstore_drug(db: Session, drugstore_id: int, drug_id: int):
    return db.query(DrugstoreDrug).filter(
        DrugstoreDrug.drugstore_id == drugstore_id,
        DrugstoreDrug.drug_id == drug_id
    ).first()


def add_drug_to_drugstore(db: Session, drugstore_id: int, drug: DrugInDrugstore) -> DrugstoreDrug:
    if not db.query(Drug).filter(Drug.id == drug.drug_id).first():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Drug not found."
        )
    if get_drugstore_drug(db, drugstore_id, drug.drug_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Drug is already listed in this drugstore."
        )

    drugstore_drug = DrugstoreDrug(
        drugstore_id=drugstore_id,
        drug_id=drug.drug_id,
        price=drug.price,
        existence=drug.existence
    )
    db.add(drugstore_drug)
    db.commit()
    db.refresh(drugstore_drug)

    logger.info(f"Drug {drug.drug_id} added to drugstore {drugstore_id}")
    return drugstore_drug


def update_drug_in_drugstore(db: Session, drugstore_id: int, drug: DrugInDrugstore) -> DrugstoreDrug:
    drugstore_drug = get_drugstore_drug(db, drugstore_id, drug.drug_id)
    if not drugstore_drug:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Drug is not listed in this drugstore."
        )

    drugstore_drug.price = drug.price
    drugstore_drug.existence = drug.existence
    db.commit()

    logger.info(f"Drug {drug.drug_id} updated in drugstore {drugstore_id}")
    return drugstore_drug
