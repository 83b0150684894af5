"""
Model package.

IMPORTANT (SQLModel):
- `SQLModel.metadata` is populated only when the table models are imported.
- `fitzone.db.engine.init_db` imports `fitzone.models` before `create_all`,
  so this module must import all SQLModel `table=True` models to register them.
"""

# Import table models so SQLModel registers them in metadata.
from fitzone.contact.models import Inquiry  # noqa: F401
from fitzone.membership.models import Membership  # noqa: F401
from fitzone.program.models import Program  # noqa: F401
from fitzone.user.models import ProgramPurchase, User  # noqa: F401
