# WasteWise — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.waste_log import WasteLog   # noqa
