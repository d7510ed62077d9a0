from pharmacy_locator.models.city import City
from pharmacy_locator.models.drug import Drug
from pharmacy_locator.models.drugstore import Drugstore
from pharmacy_locator.models.drugstore_drug import DrugstoreDrug
from pharmacy_locator.models.drugstore_work_day import DrugstoreWorkDay
