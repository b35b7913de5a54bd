"""
Modèle SQLAlchemy pour les matières.
L'url (slug lisible) est la clé de recherche publique, l'id reste interne.
"""

from sqlalchemy import Column, Integer, String, Text

from app.database import Base


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    url = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=False)
