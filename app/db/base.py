# /app/db/base.py

# Central registry for the SQLAlchemy models. Importing them here ensures
# Base.metadata knows every table when create_all or Alembic inspects it.

from .base_class import Base

from .models.generation_models import Generation
