"""
Modèle SQLAlchemy pour les demandes d'instructions (séances de tutorat).
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.database import Base

STATUS_REQUESTED = "REQUESTED"


class InstructionSession(Base):
    __tablename__ = "instruction_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date_time = Column(DateTime, nullable=False)  # UTC, sans fuseau
    professor_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(String(50), nullable=False, default=STATUS_REQUESTED)  # écrit une seule fois
