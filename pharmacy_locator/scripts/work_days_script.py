import logging
import sys
from pathlib import Path

import pandas as pd

from pharmacy_locator.constants import (
    BATCH_SIZE, DEFAULT_TIME_END, DEFAULT_TIME_START, DRUGSTORE_WORK_DAYS_CSV
)
from pharmacy_locator.exceptions import ScheduleDataError
from pharmacy_locator.models import DrugstoreWorkDay
from pharmacy_locator.schedule import index_of, parse_time
from pharmacy_locator.scripts.scripts_db import get_scripts_db

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DATA_FOLDER = Path(__file__).resolve().parent.parent / 'data'


def import_work_days(csv_file_path, session) -> int:
    """
    Load drugstore work days from a CSV file with the columns
    drugstore_id, work_day, time_start, time_end.

    Times may be HH:MM or HH:MM:SS. Rows with an unknown weekday, a malformed
    time or no drugstore_id are skipped. Returns the number of rows inserted.
    """
    inserted = 0
    chunks = pd.read_csv(csv_file_path, chunksize=BATCH_SIZE, dtype={'time_start': str, 'time_end': str})

    for chunk in chunks:
        chunk['time_start'] = chunk['time_start'].fillna(DEFAULT_TIME_START)
        chunk['time_end'] = chunk['time_end'].fillna(DEFAULT_TIME_END)
        chunk['work_day'] = chunk['work_day'].str.strip().str.upper()
        chunk['drugstore_id'] = pd.to_numeric(chunk['drugstore_id'], errors='coerce')

        work_days = []
        for index, row in chunk.iterrows():
            if pd.isna(row['drugstore_id']):
                logger.warning(f"Skipping row {index}: missing or invalid drugstore_id")
                continue

            try:
                index_of(row['work_day'])
                time_start = parse_time(row['time_start'])
                time_end = parse_time(row['time_end'])
            except ScheduleDataError as e:
                logger.warning(f"Skipping row {index}: {e.message}")
                continue

            work_days.append(DrugstoreWorkDay(
                drugstore_id=int(row['drugstore_id']),
                work_day=row['work_day'],
                time_start=time_start.replace(tzinfo=None),
                time_end=time_end.replace(tzinfo=None)
            ))

        session.add_all(work_days)
        session.commit()
        inserted += len(work_days)

    return inserted


if __name__ == '__main__':
    csv_file_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DATA_FOLDER / DRUGSTORE_WORK_DAYS_CSV

    with get_scripts_db() as session:
        count = import_work_days(csv_file_path, session)

    logger.info(f"Inserted {count} rows into drugstores_work_days table.")
