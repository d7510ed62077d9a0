from fastapi import FastAPI

from pharmacy_locator.db import Base, engine
from pharmacy_locator.routes import app_router

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Pharmacy Locator")
app.include_router(app_router)
