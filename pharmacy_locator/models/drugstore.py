from pharmacy_locator.db import Base
from sqlalchemy import Column, Float, ForeignKey, Integer, String


class Drugstore(Base):
    __tablename__ = 'drugstores'

    drugstore_id = Column(Integer, primary_key=True, index=True)
    drugstore_name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    city_id = Column(Integer, ForeignKey('cities.id'), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    phone_number = Column(String, nullable=True)
    email = Column(String, nullable=True)
    drugstore_photo_path = Column(String, nullable=True)
