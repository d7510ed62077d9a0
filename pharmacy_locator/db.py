from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from pharmacy_locator.constants import DATABASE_URI, SQL_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URI.startswith("sqlite") else {}
engine = create_engine(DATABASE_URI, echo=SQL_ECHO, connect_args=connect_args)

Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
