from sqlalchemy.orm import declarative_base

# Declarative base shared by every trade entity; engines and sessions belong to the caller
Base = declarative_base()
