from pharmacy_locator.db import Base
from sqlalchemy import Column, Integer, String


class Drug(Base):
    __tablename__ = 'drugs'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    country = Column(String, nullable=True)
