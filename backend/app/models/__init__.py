# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles
# (instruction_sessions.professor_id → users.id).

from app.models.user import User  # noqa: F401  — doit précéder instruction_session
from app.models.subject import Subject  # noqa: F401
from app.models.instruction_session import InstructionSession  # noqa: F401
