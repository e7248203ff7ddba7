"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here for Alembic to detect them
from meetgrid.db.models.meeting import Meeting  # noqa: F401, E402
from meetgrid.db.models.slot import Slot  # noqa: F401, E402
from meetgrid.db.models.participant import Participant  # noqa: F401, E402
from meetgrid.db.models.response import Response  # noqa: F401, E402
