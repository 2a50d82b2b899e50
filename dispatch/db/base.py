# Import all the models, so that Base has them before being
# imported by Alembic or used by create_all
from dispatch.db.base_class import Base  # noqa
from dispatch.models.driver import Driver  # noqa
from dispatch.models.trip import Trip  # noqa
from dispatch.models.bill import Bill  # noqa
