from pharmacy_locator.db import Base
from sqlalchemy import Column, ForeignKey, Integer, String, Time
from datetime import time


class DrugstoreWorkDay(Base):
    __tablename__ = 'drugstores_work_days'

    id = Column(Integer, primary_key=True, index=True)
    drugstore_id = Column(Integer, ForeignKey('drugstores.drugstore_id'), nullable=False, index=True)
    work_day = Column(String, nullable=False)  # MONDAY .. SUNDAY
    time_start = Column(Time, nullable=False, default=time(0, 0, 0))
    time_end = Column(Time, nullable=False, default=time(23, 59, 59))
