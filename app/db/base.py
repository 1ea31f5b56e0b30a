"""
Declarative base shared by every ORM model.

Kept free of model imports so models can import it without cycles.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
