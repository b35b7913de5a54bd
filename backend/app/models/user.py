"""
Modèle SQLAlchemy pour les utilisateurs (élèves et professeurs dans la même table).

Pas de colonne de rôle : un professeur est un utilisateur dont `subjects`
est renseigné. `subjects` est un texte libre contenant les slugs des matières
enseignées, comparé par inclusion de sous-chaîne (pas de table de liaison).
"""

from sqlalchemy import Column, Integer, String, Text

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    profile_picture = Column(String(500), nullable=True)
    subjects = Column(Text, nullable=True)  # ex: "math,physics"
    instructions_count = Column(Integer, nullable=True)
