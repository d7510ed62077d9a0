import os

from dotenv import load_dotenv

# Specify the path to your .env file
dotenv_path = os.path.join(os.path.dirname(__file__), '..', '.env')
load_dotenv(dotenv_path)

DATABASE_URI = os.getenv("DATABASE_URI", "sqlite:///./pharmacy_locator.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
IMAGES_BASE_URL = os.getenv('IMAGES_BASE_URL', 'http://localhost:8000/images')

DAYS_OF_WEEK = ('MONDAY', 'TUESDAY', 'WEDNESDAY', 'THURSDAY', 'FRIDAY', 'SATURDAY', 'SUNDAY')

PHOTO_SMALL = 'small'

CURRENT_DRUGSTORE_HEADER = 'X-Drugstore-Id'

DEFAULT_TIME_START = '00:00:00'
DEFAULT_TIME_END = '23:59:59'

DRUGSTORE_WORK_DAYS_CSV = 'drugstore work days.csv'
BATCH_SIZE = 10000
