from pharmacy_locator.db import Base
from sqlalchemy import Column, Integer, String


class City(Base):
    __tablename__ = 'cities'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
