from pharmacy_locator.db import Base
from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, UniqueConstraint


class DrugstoreDrug(Base):
    __tablename__ = 'drugstore_drugs'
    __table_args__ = (UniqueConstraint('drugstore_id', 'drug_id'),)

    id = Column(Integer, primary_key=True)
    drugstore_id = Column(Integer, ForeignKey('drugstores.drugstore_id'), nullable=False, index=True)
    drug_id = Column(Integer, ForeignKey('drugs.id'), nullable=False, index=True)
    price = Column(Float, nullable=False)
    existence = Column(Boolean, nullable=False, default=True)
