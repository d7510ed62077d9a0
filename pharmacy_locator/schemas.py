from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class DayInterval(BaseModel):
    start: str
    end: str


class WorkScheduleGroup(BaseModel):
    open_time: str
    close_time: str
    weekdays: List[str]
    day_intervals: List[DayInterval]


class DrugstoreSchedule(BaseModel):
    work_schedule: List[WorkScheduleGroup] = []
    closed_days: List[str] = []


class DrugstoreSummary(DrugstoreSchedule):
    drugstore_id: int
    name: str
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    phone_number: Optional[str] = None


class DrugstoreProfile(DrugstoreSummary):
    city: Optional[str] = None
    email: Optional[str] = None
    photo_url: Optional[str] = None
    is_owner: bool = False


class DrugInfo(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    existence: bool = True
    country_name: Optional[str] = None


class DrugstoreDrugs(DrugstoreSummary):
    drugs: List[DrugInfo] = []


class DrugIds(BaseModel):
    drugs_id: List[int] = Field(min_length=1)

    @field_validator('drugs_id')
    @classmethod
    def unique_drug_ids(cls, drugs_id: List[int]) -> List[int]:
        return list(dict.fromkeys(drugs_id))


class DrugSearchByDrugstore(DrugIds):
    drugstore_id: int


class DrugInDrugstore(BaseModel):
    drug_id: int
    price: float = Field(ge=0)
    existence: bool = True


class WorkDayRequest(BaseModel):
    work_day: str
    time_start: str
    time_end: str


class UpdateDrugstoreInfo(BaseModel):
    drugstore_name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city_id: Optional[int] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    phone_number: Optional[str] = None
    work_days: List[WorkDayRequest] = []
